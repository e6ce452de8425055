# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Appnigma SDK tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest

from appnigma_integrations.core.config import AppnigmaConfig


@pytest.fixture
def api_key():
    """Test API key. Must never appear in log output."""
    return "sk_test_abcdef0123456789"


@pytest.fixture
def sample_base_url():
    """Standard test base URL."""
    return "https://api.example.com"


@pytest.fixture
def test_config(api_key, sample_base_url):
    """Resolved configuration with safe defaults."""
    return AppnigmaConfig.resolve(api_key, sample_base_url)


@pytest.fixture
def debug_config(api_key, sample_base_url):
    """Configuration with debug logging enabled."""
    return AppnigmaConfig.resolve(api_key, sample_base_url, debug=True)


@pytest.fixture
def sample_connection_id():
    return "conn_123"
