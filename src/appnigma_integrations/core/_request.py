# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Request construction shared by the synchronous and asynchronous clients.

Builds the URL, headers and JSON body for each API operation from an
:class:`~appnigma_integrations.core.config.AppnigmaConfig`. Nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, urlencode

from ..common.constants import (
    CONNECTION_CREDENTIALS_PATH,
    CONNECTIONS_PATH,
    HEADER_AUTHORIZATION,
    HEADER_CONNECTION_ID,
    HEADER_CONTENT_TYPE,
    HEADER_INTEGRATION_ID,
    HEADER_USER_AGENT,
    SALESFORCE_PROXY_PATH,
    USER_AGENT,
)
from ..models.proxy import SalesforceProxyRequest
from .config import AppnigmaConfig

ProxyRequestLike = Union[SalesforceProxyRequest, Mapping[str, Any]]


@dataclass(frozen=True)
class _PreparedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    json: Optional[Any] = None


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _list_query(
    environment: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
    limit: Optional[int] = None,
    cursor: Optional[str] = None,
) -> List[Tuple[str, str]]:
    candidates = (
        ("environment", environment),
        ("status", status),
        ("search", search),
        ("limit", limit),
        ("cursor", cursor),
    )
    return [(name, _stringify(value)) for name, value in candidates if value is not None]


class _RequestBuilder:
    """
    Builds :class:`_PreparedRequest` objects for each API endpoint.

    :param config: Resolved client configuration.
    :type config: ~appnigma_integrations.core.config.AppnigmaConfig
    """

    def __init__(self, config: AppnigmaConfig) -> None:
        self._config = config

    def _headers(self, integration_id: Optional[str] = None) -> Dict[str, str]:
        headers = {
            HEADER_AUTHORIZATION: f"Bearer {self._config.api_key}",
            HEADER_USER_AGENT: USER_AGENT,
        }
        if integration_id:
            headers[HEADER_INTEGRATION_ID] = integration_id
        return headers

    def list_connections(
        self,
        *,
        integration_id: Optional[str] = None,
        environment: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> _PreparedRequest:
        query = urlencode(_list_query(environment, status, search, limit, cursor))
        url = f"{self._config.base_url}{CONNECTIONS_PATH}"
        if query:
            url = f"{url}?{query}"
        return _PreparedRequest("GET", url, self._headers(integration_id))

    def connection_credentials(
        self,
        connection_id: str,
        integration_id: Optional[str] = None,
    ) -> _PreparedRequest:
        path = CONNECTION_CREDENTIALS_PATH.format(connection_id=quote(str(connection_id), safe=""))
        return _PreparedRequest("GET", f"{self._config.base_url}{path}", self._headers(integration_id))

    def proxy_salesforce(
        self,
        connection_id: str,
        request: ProxyRequestLike,
        integration_id: Optional[str] = None,
    ) -> _PreparedRequest:
        # The connection id travels only in the header, never in the URL or body
        headers = self._headers(integration_id)
        headers[HEADER_CONTENT_TYPE] = "application/json"
        headers[HEADER_CONNECTION_ID] = connection_id
        if isinstance(request, SalesforceProxyRequest):
            payload: Any = request.to_payload()
        else:
            payload = dict(request)
        return _PreparedRequest("POST", f"{self._config.base_url}{SALESFORCE_PROXY_PATH}", headers, payload)
