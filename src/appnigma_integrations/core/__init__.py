# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Core infrastructure components for the Appnigma Integrations SDK.

This module contains the foundational components including configuration,
HTTP transports, request construction and error handling.
"""

from .config import AppnigmaConfig
from .errors import AppnigmaAPIError, AppnigmaError, ConfigurationError

__all__ = [
    "AppnigmaConfig",
    "AppnigmaAPIError",
    "AppnigmaError",
    "ConfigurationError",
]
