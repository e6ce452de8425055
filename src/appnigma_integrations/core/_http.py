# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
HTTP transports with fixed timeout handling and optional connection reuse.

This module provides :class:`_HttpClient`, a wrapper around the requests library,
and :class:`_AsyncHttpClient`, its httpx counterpart for coroutine callers. Both
apply the SDK timeout to every request, raise for non-2xx responses, and never
retry.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import requests

from ..common.constants import DEFAULT_TIMEOUT


class _HttpClient:
    """
    Blocking HTTP transport.

    :param timeout: Request timeout in seconds. Default is 30.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection pooling. If provided,
        all requests use this session for efficient connection reuse.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request with the configured timeout.

        When a session is configured, uses the session for connection pooling;
        otherwise uses standalone requests.

        :param method: HTTP method (GET, POST, ...).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, such as headers and json.
        :return: HTTP response object with a 2xx status.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: On network failure or a non-2xx status.
        """
        kwargs["timeout"] = self.timeout
        if self._session is not None:
            response = self._session.request(method, url, **kwargs)
        else:
            response = requests.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None


class _AsyncHttpClient:
    """
    Coroutine HTTP transport built on :class:`httpx.AsyncClient`.

    Without a client, each request opens and closes its own
    :class:`httpx.AsyncClient`.

    :param timeout: Request timeout in seconds. Default is 30.
    :type timeout: :class:`float` | None
    :param client: Optional shared :class:`httpx.AsyncClient` used for every request.
    :type client: :class:`httpx.AsyncClient` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._client = client

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Execute an HTTP request with the configured timeout, following redirects.

        :raises httpx.HTTPError: On network failure or a non-2xx status.
        """
        kwargs["timeout"] = self.timeout
        kwargs["follow_redirects"] = True
        if self._client is not None:
            response = await self._client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
