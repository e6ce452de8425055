# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""Unit tests for client context manager support."""

import unittest
from unittest.mock import AsyncMock, MagicMock

import httpx
import requests

from appnigma_integrations import AppnigmaClient, AppnigmaSyncClient


class TestSyncContextManager(unittest.TestCase):
    """Test context manager support on AppnigmaSyncClient."""

    def setUp(self):
        self.api_key = "sk_test_key"

    def test_enter_creates_session(self):
        client = AppnigmaSyncClient(self.api_key)
        self.assertIsNone(client._session)

        result = client.__enter__()

        self.assertIsInstance(client._session, requests.Session)
        self.assertIs(client._http._session, client._session)
        self.assertTrue(client._owns_session)
        self.assertIs(result, client)
        client.close()

    def test_exit_closes_session(self):
        client = AppnigmaSyncClient(self.api_key)
        client.__enter__()

        mock_session = MagicMock(spec=requests.Session)
        client._session = mock_session
        client._http._session = mock_session

        client.__exit__(None, None, None)

        mock_session.close.assert_called_once()
        self.assertIsNone(client._session)
        self.assertIsNone(client._http._session)
        self.assertFalse(client._owns_session)

    def test_close_idempotent(self):
        client = AppnigmaSyncClient(self.api_key)
        client.__enter__()

        # Should not raise
        client.close()
        client.close()

    def test_close_without_enter(self):
        client = AppnigmaSyncClient(self.api_key)
        client.close()
        self.assertIsNone(client._session)

    def test_exit_with_exception(self):
        client = AppnigmaSyncClient(self.api_key)

        try:
            with client:
                self.assertIsNotNone(client._session)
                raise ValueError("Test exception")
        except ValueError:
            pass

        self.assertIsNone(client._session)

    def test_caller_session_not_closed(self):
        mock_session = MagicMock(spec=requests.Session)

        with AppnigmaSyncClient(self.api_key, session=mock_session) as client:
            self.assertIs(client._session, mock_session)
            self.assertFalse(client._owns_session)

        mock_session.close.assert_not_called()

    def test_nested_enter_reuses_session(self):
        client = AppnigmaSyncClient(self.api_key)

        with client:
            session1 = client._session
            client.__enter__()
            self.assertIs(client._session, session1)


class TestAsyncContextManager(unittest.IsolatedAsyncioTestCase):
    """Test async context manager support on AppnigmaClient."""

    async def test_enter_creates_pooled_client(self):
        client = AppnigmaClient("sk_test_key")
        self.assertIsNone(client._http._client)

        async with client as entered:
            self.assertIs(entered, client)
            self.assertIsInstance(client._http._client, httpx.AsyncClient)
            self.assertTrue(client._owns_http_client)
            pooled = client._http._client

        self.assertTrue(pooled.is_closed)
        self.assertIsNone(client._http._client)
        self.assertFalse(client._owns_http_client)

    async def test_aclose_idempotent(self):
        client = AppnigmaClient("sk_test_key")
        await client.__aenter__()
        await client.aclose()
        await client.aclose()

    async def test_caller_client_not_closed(self):
        shared = MagicMock(spec=httpx.AsyncClient)
        shared.aclose = AsyncMock()

        async with AppnigmaClient("sk_test_key", http_client=shared) as client:
            self.assertIs(client._http._client, shared)
            self.assertFalse(client._owns_http_client)

        shared.aclose.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
