# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Data models for the Appnigma Integrations SDK.

Response shapes are :class:`~typing.TypedDict` declarations describing the
decoded JSON returned by the API; the SDK never converts or validates them.
"""

from .connection import (
    ConnectionCredentials,
    ConnectionSummary,
    ErrorDetails,
    ListConnectionsResponse,
)
from .proxy import SalesforceProxyRequest

__all__ = [
    "ConnectionCredentials",
    "ConnectionSummary",
    "ErrorDetails",
    "ListConnectionsResponse",
    "SalesforceProxyRequest",
]
