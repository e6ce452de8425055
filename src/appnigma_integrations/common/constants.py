# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Constants for the Appnigma Integrations API.

These constants define the service endpoints, header names and fixed
request settings shared by the synchronous and asynchronous clients.
"""

SDK_VERSION = "0.1.3"

DEFAULT_BASE_URL = "https://integrations.appnigma.ai"

DEFAULT_TIMEOUT = 30.0
"""Request timeout in seconds applied to every call."""

API_KEY_ENV_VAR = "APPNIGMA_API_KEY"
"""Environment variable consulted when no API key is passed explicitly."""

USER_AGENT = f"Appnigma-Integrations-Client-Python/{SDK_VERSION}"

# Endpoint paths (relative to the base URL)
CONNECTIONS_PATH = "/api/v1/connections"
CONNECTION_CREDENTIALS_PATH = "/api/v1/connections/{connection_id}/credentials"
SALESFORCE_PROXY_PATH = "/api/v1/proxy/salesforce"

# Header names
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_INTEGRATION_ID = "X-Integration-Id"
HEADER_CONNECTION_ID = "X-Connection-Id"

REDACTED_AUTHORIZATION = "Bearer ***"

LOG_PREFIX = "[Appnigma SDK]"
