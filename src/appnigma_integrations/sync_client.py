# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import requests

from .core._debug_log import _DebugLogger
from .core._error_mapping import _decode_body, _map_error
from .core._http import _HttpClient
from .core._request import ProxyRequestLike, _PreparedRequest, _RequestBuilder
from .core.config import AppnigmaConfig
from .models.connection import ConnectionCredentials, ListConnectionsResponse


class AppnigmaSyncClient:
    """
    Blocking client for the Appnigma Integrations API.

    Same operations, arguments and error behavior as
    :class:`~appnigma_integrations.client.AppnigmaClient`, for code that does not
    run an event loop.

    **Context Manager Support**:
        Using the client as a context manager creates one :class:`requests.Session`
        for the block and closes it on exit::

            with AppnigmaSyncClient(api_key="...") as client:
                creds = client.get_connection_credentials("conn_123")

    :param api_key: API key. Falls back to the ``APPNIGMA_API_KEY`` environment variable.
    :type api_key: :class:`str` | None
    :param base_url: API base URL. One trailing slash is removed.
    :type base_url: :class:`str` | None
    :param debug: Log redacted requests and responses through :mod:`logging`.
    :type debug: :class:`bool`
    :param config: Pre-resolved configuration. When given, the other arguments are ignored.
    :type config: ~appnigma_integrations.core.config.AppnigmaConfig | None
    :param session: Caller-owned :class:`requests.Session`. The SDK never closes it.
    :type session: :class:`requests.Session` | None

    :raises ~appnigma_integrations.core.errors.ConfigurationError: If no API key is available.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
        *,
        config: Optional[AppnigmaConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config or AppnigmaConfig.from_env(api_key, base_url, debug)
        self._requests = _RequestBuilder(self._config)
        self._debug = _DebugLogger(self._config.logger_name, self._config.debug)
        self._http = _HttpClient(session=session)
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def debug(self) -> bool:
        return self._config.debug

    def __enter__(self) -> "AppnigmaSyncClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied.
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            self._http = _HttpClient(session=self._session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the session opened by the context manager.

        Caller-supplied sessions are left open. Safe to call multiple times.
        """
        if self._session is not None and self._owns_session:
            self._http.close()
            self._http = _HttpClient()
            self._session = None
            self._owns_session = False

    def _send(self, prepare: Callable[..., _PreparedRequest], *args: Any, **kwargs: Any) -> Any:
        method = url = ""
        try:
            prepared = prepare(*args, **kwargs)
            method, url = prepared.method, prepared.url
            self._debug.log_request(method, url, prepared.headers, prepared.json)
            options: Dict[str, Any] = {"headers": prepared.headers}
            if prepared.json is not None:
                options["json"] = prepared.json
            response = self._http._request(method, url, **options)
            body = _decode_body(response)
        except Exception as exc:
            raise _map_error(exc, method, url, self._http.timeout) from exc
        self._debug.log_response(method, url, response.status_code, body)
        return body

    def list_connections(
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

        See :meth:`AppnigmaClient.list_connections <appnigma_integrations.client.AppnigmaClient.list_connections>`.
        """
        return self._send(
            self._requests.list_connections,
            integration_id=integration_id,
            environment=environment,
            status=status,
            search=search,
            limit=limit,
            cursor=cursor,
        )

    def get_connection_credentials(
        self,
        connection_id: str,
        integration_id: Optional[str] = None,
    ) -> ConnectionCredentials:
        """Get the Salesforce access token and metadata for a connection."""
        return self._send(self._requests.connection_credentials, connection_id, integration_id)

    def proxy_salesforce_request(
        self,
        connection_id: str,
        request: ProxyRequestLike,
        integration_id: Optional[str] = None,
    ) -> Any:
        """Proxy a Salesforce API request and return the raw Salesforce response."""
        return self._send(self._requests.proxy_salesforce, connection_id, request, integration_id)
