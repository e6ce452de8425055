# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Debug logging of requests and responses with API key redaction.

Output goes through the standard :mod:`logging` module at ``DEBUG`` level.
Formatting problems never propagate to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..common.constants import HEADER_AUTHORIZATION, LOG_PREFIX, REDACTED_AUTHORIZATION


def _dump(value: Any) -> str:
    try:
        return json.dumps(value, indent=2, default=str)
    except (TypeError, ValueError):
        return repr(value)


def _redact_headers(headers: Mapping[str, str]) -> dict:
    redacted = dict(headers)
    if redacted.get(HEADER_AUTHORIZATION):
        redacted[HEADER_AUTHORIZATION] = REDACTED_AUTHORIZATION
    return redacted


class _DebugLogger:
    """
    Emits redacted request/response details when debug mode is enabled.

    :param name: Logger name.
    :type name: str
    :param enabled: When ``False`` every call is a no-op.
    :type enabled: bool
    """

    def __init__(self, name: str, enabled: bool) -> None:
        self.enabled = enabled
        self._logger = logging.getLogger(name)
        if enabled:
            self._logger.setLevel(logging.DEBUG)

    def log_request(self, method: str, url: str, headers: Mapping[str, str], body: Optional[Any] = None) -> None:
        if not self.enabled:
            return
        try:
            self._logger.debug("%s %s %s", LOG_PREFIX, method, url)
            self._logger.debug("%s Headers: %s", LOG_PREFIX, _dump(_redact_headers(headers)))
            if body:
                self._logger.debug("%s Request Body: %s", LOG_PREFIX, _dump(body))
        except Exception:
            self._logger.debug("%s Could not log request %s %s", LOG_PREFIX, method, url, exc_info=True)

    def log_response(self, method: str, url: str, status: int, body: Any) -> None:
        if not self.enabled:
            return
        try:
            self._logger.debug("%s %s %s - Status: %s", LOG_PREFIX, method, url, status)
            self._logger.debug("%s Response Body: %s", LOG_PREFIX, _dump(body))
        except Exception:
            self._logger.debug("%s Could not log response %s %s", LOG_PREFIX, method, url, exc_info=True)
