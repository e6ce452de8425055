# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Structured errors raised by the Appnigma Integrations SDK.

Every runtime failure surfaces as :class:`AppnigmaAPIError`. Callers should
branch on :attr:`~AppnigmaAPIError.status_code` and
:attr:`~AppnigmaAPIError.error_code`; the message is for humans only.
A ``status_code`` of ``0`` means no HTTP response was obtained.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ._error_codes import (
    CURRENT_USAGE_FIELD,
    NETWORK_ERROR,
    NO_RESPONSE_STATUS,
    OFFERINGS_FIELD,
    PLAN_LIMIT_FIELD,
    RATE_LIMIT_STATUS,
)

if TYPE_CHECKING:
    from ..models.connection import ErrorDetails


class AppnigmaError(Exception):
    """Base class for all errors raised by the SDK."""


class ConfigurationError(AppnigmaError, ValueError):
    """Raised at client construction when the configuration is unusable."""


class AppnigmaAPIError(AppnigmaError):
    """
    Normalized error for a failed API call.

    :param status_code: HTTP status code, or ``0`` when no response exists.
    :type status_code: :class:`int`
    :param error_code: Machine-readable error code, e.g. ``"NetworkError"`` or the
        ``error`` field of the API's error payload.
    :type error_code: :class:`str`
    :param message: Human-readable description.
    :type message: :class:`str`
    :param response_body: Full decoded response body, when a response was received.
    :type response_body: :class:`typing.Any` | None
    """

    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        response_body: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.response_body = response_body

    @property
    def is_network_error(self) -> bool:
        """``True`` when the request never produced an HTTP response."""
        return self.status_code == NO_RESPONSE_STATUS and self.error_code == NETWORK_ERROR

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == RATE_LIMIT_STATUS

    def details(self) -> "ErrorDetails":
        """
        Return the error details, including rate limit information when present.

        ``planLimit``, ``currentUsage`` and ``offerings`` are included only when
        the response body carried a ``planLimit`` field. They are never defaulted.

        :return: Mapping with ``error`` and ``message`` plus optional plan fields.
        :rtype: :class:`dict`
        """
        details: Dict[str, Any] = {"error": self.error_code, "message": self.message}
        body = self.response_body
        if isinstance(body, dict) and PLAN_LIMIT_FIELD in body:
            for field in (PLAN_LIMIT_FIELD, CURRENT_USAGE_FIELD, OFFERINGS_FIELD):
                if field in body:
                    details[field] = body[field]
        return details  # type: ignore[return-value]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "error_code": self.error_code,
            "message": self.message,
            "response_body": self.response_body,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"{self.__class__.__name__}(status_code={self.status_code!r}, "
            f"error_code={self.error_code!r}, message={self.message!r})"
        )


__all__ = ["AppnigmaError", "ConfigurationError", "AppnigmaAPIError"]
