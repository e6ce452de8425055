# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import httpx

from .core._debug_log import _DebugLogger
from .core._error_mapping import _decode_body, _map_error
from .core._http import _AsyncHttpClient
from .core._request import ProxyRequestLike, _PreparedRequest, _RequestBuilder
from .core.config import AppnigmaConfig
from .models.connection import ConnectionCredentials, ListConnectionsResponse


class AppnigmaClient:
    """
    Asynchronous client for the Appnigma Integrations API.

    Lists Salesforce connections, fetches connection credentials and proxies
    Salesforce REST calls through the Appnigma API. Every operation is a single
    round trip; failures are raised as
    :class:`~appnigma_integrations.core.errors.AppnigmaAPIError`. The client never
    retries. Configuration is read-only after construction, so one instance can
    serve concurrent calls.

    **Context Manager Support (Recommended for many calls)**:
        Inside ``async with`` the client keeps one pooled :class:`httpx.AsyncClient`
        and closes it on exit::

            async with AppnigmaClient(api_key="...") as client:
                page = await client.list_connections(status="connected")

    Without a context manager every call opens and closes its own connection.

    :param api_key: API key. Falls back to the ``APPNIGMA_API_KEY`` environment variable.
    :type api_key: :class:`str` | None
    :param base_url: API base URL. Defaults to ``https://integrations.appnigma.ai``;
        one trailing slash is removed.
    :type base_url: :class:`str` | None
    :param debug: Log redacted requests and responses through :mod:`logging`. Output
        needs a handler configured by the application.
    :type debug: :class:`bool`
    :param config: Pre-resolved configuration. When given, the other arguments are ignored.
    :type config: ~appnigma_integrations.core.config.AppnigmaConfig | None
    :param http_client: Caller-owned :class:`httpx.AsyncClient` to send requests with.
        The SDK never closes it.
    :type http_client: :class:`httpx.AsyncClient` | None

    :raises ~appnigma_integrations.core.errors.ConfigurationError: If no API key is available.

    Example::

        import asyncio
        from appnigma_integrations import AppnigmaClient, SalesforceProxyRequest

        async def main():
            client = AppnigmaClient()
            creds = await client.get_connection_credentials("conn_123")
            accounts = await client.proxy_salesforce_request(
                "conn_123",
                SalesforceProxyRequest(
                    method="GET",
                    path="/services/data/v59.0/query",
                    query={"q": "SELECT Id, Name FROM Account LIMIT 10"},
                ),
            )

        asyncio.run(main())
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
        *,
        config: Optional[AppnigmaConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._config = config or AppnigmaConfig.from_env(api_key, base_url, debug)
        self._requests = _RequestBuilder(self._config)
        self._debug = _DebugLogger(self._config.logger_name, self._config.debug)
        self._http = _AsyncHttpClient(client=http_client)
        self._owns_http_client = False

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def debug(self) -> bool:
        return self._config.debug

    async def __aenter__(self) -> "AppnigmaClient":
        if self._http._client is None:
            self._http = _AsyncHttpClient(client=httpx.AsyncClient())
            self._owns_http_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """
        Close the pooled connection opened by ``async with``.

        Caller-supplied clients are left open. Safe to call multiple times.
        """
        if self._owns_http_client:
            await self._http.aclose()
            self._http = _AsyncHttpClient()
            self._owns_http_client = False

    async def _send(self, prepare: Callable[..., _PreparedRequest], *args: Any, **kwargs: Any) -> Any:
        method = url = ""
        try:
            prepared = prepare(*args, **kwargs)
            method, url = prepared.method, prepared.url
            self._debug.log_request(method, url, prepared.headers, prepared.json)
            options: Dict[str, Any] = {"headers": prepared.headers}
            if prepared.json is not None:
                options["json"] = prepared.json
            response = await self._http._request(method, url, **options)
            body = _decode_body(response)
        except Exception as exc:
            raise _map_error(exc, method, url, self._http.timeout) from exc
        self._debug.log_response(method, url, response.status_code, body)
        return body

    async def list_connections(
        self,
        *,
        integration_id: Optional[str] = None,
        environment: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> ListConnectionsResponse:
        """
        List connections for the integration.

        Filters left as ``None`` are not sent. Results are one page; pass the
        returned ``nextCursor`` as ``cursor`` to fetch the next one.

        :param integration_id: Integration to act for, when the API key allows it.
        :type integration_id: :class:`str` | None
        :param environment: Filter by Salesforce environment, e.g. ``"production"``.
        :type environment: :class:`str` | None
        :param status: Filter by connection status, e.g. ``"connected"``.
        :type status: :class:`str` | None
        :param search: Free-text search.
        :type search: :class:`str` | None
        :param limit: Page size.
        :type limit: :class:`int` | None
        :param cursor: Pagination cursor from a previous response.
        :type cursor: :class:`str` | None
        :return: Decoded response with ``connections``, ``totalCount`` and optional ``nextCursor``.
        :rtype: dict
        :raises ~appnigma_integrations.core.errors.AppnigmaAPIError: If the request fails.
        """
        return await self._send(
            self._requests.list_connections,
            integration_id=integration_id,
            environment=environment,
            status=status,
            search=search,
            limit=limit,
            cursor=cursor,
        )

    async def get_connection_credentials(
        self,
        connection_id: str,
        integration_id: Optional[str] = None,
    ) -> ConnectionCredentials:
        """
        Get the Salesforce access token and metadata for a connection.

        :param connection_id: The connection ID.
        :type connection_id: :class:`str`
        :param integration_id: Optional integration ID, required if the API key is not integration-scoped.
        :type integration_id: :class:`str` | None
        :return: Decoded credentials.
        :rtype: dict
        :raises ~appnigma_integrations.core.errors.AppnigmaAPIError: If the request fails.
        """
        return await self._send(self._requests.connection_credentials, connection_id, integration_id)

    async def proxy_salesforce_request(
        self,
        connection_id: str,
        request: ProxyRequestLike,
        integration_id: Optional[str] = None,
    ) -> Any:
        """
        Proxy a Salesforce API request through Appnigma.

        Appnigma performs the Salesforce call server-side, refreshing the token
        when needed. The Salesforce response is returned exactly as decoded.

        :param connection_id: The connection ID to use. Sent only as the ``X-Connection-Id`` header.
        :type connection_id: :class:`str`
        :param request: Salesforce method, path, query and data.
        :type request: ~appnigma_integrations.models.proxy.SalesforceProxyRequest | ~typing.Mapping
        :param integration_id: Optional integration ID, required if the API key is not integration-scoped.
        :type integration_id: :class:`str` | None
        :return: Raw Salesforce API response.
        :raises ~appnigma_integrations.core.errors.AppnigmaAPIError: If the request fails.
        """
        return await self._send(self._requests.proxy_salesforce, connection_id, request, integration_id)
