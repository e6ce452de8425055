# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Python SDK for the Appnigma Integrations API.

Provides :class:`AppnigmaClient` (asyncio) and :class:`AppnigmaSyncClient`
(blocking) for listing Salesforce connections, fetching connection credentials
and proxying Salesforce REST calls.
"""

import logging

from .client import AppnigmaClient
from .common.constants import SDK_VERSION as __version__
from .core.config import AppnigmaConfig
from .core.errors import AppnigmaAPIError, AppnigmaError, ConfigurationError
from .models import (
    ConnectionCredentials,
    ConnectionSummary,
    ErrorDetails,
    ListConnectionsResponse,
    SalesforceProxyRequest,
)
from .sync_client import AppnigmaSyncClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "AppnigmaClient",
    "AppnigmaSyncClient",
    "AppnigmaConfig",
    "AppnigmaError",
    "AppnigmaAPIError",
    "ConfigurationError",
    "ConnectionCredentials",
    "ConnectionSummary",
    "ErrorDetails",
    "ListConnectionsResponse",
    "SalesforceProxyRequest",
]
