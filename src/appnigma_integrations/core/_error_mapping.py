# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Failure classification for API calls.

:func:`_map_error` turns any exception raised while performing a request,
from either the ``requests`` or the ``httpx`` transport, into an
:class:`~appnigma_integrations.core.errors.AppnigmaAPIError`. Checks run in a
fixed order so that network failures are never reported as API failures.
"""

from __future__ import annotations

from typing import Any

import httpx
import requests

from ._error_codes import (
    API_ERROR,
    NETWORK_ERROR,
    NO_RESPONSE_STATUS,
    REQUEST_ERROR,
    UNKNOWN_ERROR,
)
from .errors import AppnigmaAPIError

_TIMEOUT_ERRORS = (requests.exceptions.Timeout, httpx.TimeoutException)
_TRANSPORT_ERRORS = (requests.exceptions.RequestException, httpx.HTTPError)


def _decode_body(response: Any) -> Any:
    """
    Decode a response body the way the API returns it.

    Empty bodies decode to ``None``; bodies that are not JSON are returned as text.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _is_connection_failure(exc: BaseException) -> bool:
    if isinstance(exc, httpx.ConnectError):
        return True
    if isinstance(exc, requests.exceptions.ConnectionError):
        # TLS and proxy failures are transport problems, not an unreachable host
        return not isinstance(exc, (requests.exceptions.SSLError, requests.exceptions.ProxyError))
    return False


def _error_response(exc: BaseException) -> Any:
    if isinstance(exc, (requests.exceptions.HTTPError, httpx.HTTPStatusError)):
        return getattr(exc, "response", None)
    return None


def _api_error_from_response(response: Any) -> AppnigmaAPIError:
    status_code = response.status_code
    body = _decode_body(response)
    if body is None or body == "":
        body = {}
    fields = body if isinstance(body, dict) else {}
    return AppnigmaAPIError(
        status_code,
        fields.get("error") or API_ERROR,
        fields.get("message") or f"API request failed with status {status_code}",
        body,
    )


def _map_error(exc: BaseException, method: str, url: str, timeout: float) -> AppnigmaAPIError:
    """
    Convert an exception raised during a request into an :class:`AppnigmaAPIError`.

    :param exc: The exception raised by the transport or by SDK code.
    :type exc: BaseException
    :param method: HTTP method of the failed request.
    :type method: str
    :param url: Full URL of the failed request.
    :type url: str
    :param timeout: Timeout in seconds that applied to the request.
    :type timeout: float
    :return: The normalized error.
    :rtype: ~appnigma_integrations.core.errors.AppnigmaAPIError
    """
    if isinstance(exc, AppnigmaAPIError):
        return exc

    if isinstance(exc, _TIMEOUT_ERRORS):
        return AppnigmaAPIError(
            NO_RESPONSE_STATUS,
            NETWORK_ERROR,
            f"Request timeout: {method} {url} exceeded {int(timeout * 1000)}ms",
        )

    if _is_connection_failure(exc):
        return AppnigmaAPIError(
            NO_RESPONSE_STATUS,
            NETWORK_ERROR,
            f"Connection failed: Unable to reach {url}",
        )

    response = _error_response(exc)
    if response is not None:
        return _api_error_from_response(response)

    if isinstance(exc, _TRANSPORT_ERRORS):
        return AppnigmaAPIError(
            NO_RESPONSE_STATUS,
            REQUEST_ERROR,
            str(exc) or "Unknown request error",
        )

    return AppnigmaAPIError(
        NO_RESPONSE_STATUS,
        UNKNOWN_ERROR,
        str(exc) or "An unknown error occurred",
    )
