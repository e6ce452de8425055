# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""Request descriptor for proxied Salesforce calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass(frozen=True)
class SalesforceProxyRequest:
    """
    A Salesforce REST call to be executed server-side by the proxy endpoint.

    :param method: HTTP method for the Salesforce call.
    :type method: str
    :param path: Salesforce API path, e.g. ``/services/data/v59.0/query``.
    :type path: str
    :param query: Optional query parameters.
    :type query: ~typing.Mapping[str, typing.Any] or None
    :param data: Optional request body for POST, PUT and PATCH. Any JSON value.
    :type data: typing.Any

    Example::

        request = SalesforceProxyRequest(
            method="GET",
            path="/services/data/v59.0/query",
            query={"q": "SELECT Id, Name FROM Account LIMIT 10"},
        )
    """

    method: HttpMethod
    path: str
    query: Optional[Mapping[str, Any]] = None
    data: Any = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body sent to the proxy endpoint, omitting unset fields."""
        payload: Dict[str, Any] = {"method": self.method, "path": self.path}
        if self.query is not None:
            payload["query"] = dict(self.query)
        if self.data is not None:
            payload["data"] = self.data
        return payload
