# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

from unittest.mock import AsyncMock, MagicMock, Mock, patch

import httpx
import pytest
import requests

from appnigma_integrations.core._http import _AsyncHttpClient, _HttpClient


class TestHttpClient:
    """Test the blocking transport."""

    def test_default_timeout(self):
        assert _HttpClient().timeout == 30.0

    @patch("requests.request")
    def test_successful_request_single_attempt(self, mock_request):
        mock_response = Mock(status_code=200)
        mock_request.return_value = mock_response

        client = _HttpClient()
        response = client._request("GET", "https://test.example.com", headers={"A": "b"})

        assert response is mock_response
        mock_request.assert_called_once_with("GET", "https://test.example.com", headers={"A": "b"}, timeout=30.0)
        mock_response.raise_for_status.assert_called_once()

    @patch("requests.request")
    def test_timeout_cannot_be_overridden_per_call(self, mock_request):
        mock_request.return_value = Mock(status_code=200)

        _HttpClient()._request("GET", "https://test.example.com", timeout=999)

        assert mock_request.call_args.kwargs["timeout"] == 30.0

    @patch("requests.request")
    def test_network_error_not_retried(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("Network error")

        with pytest.raises(requests.exceptions.ConnectionError):
            _HttpClient()._request("GET", "https://test.example.com")
        assert mock_request.call_count == 1

    @patch("requests.request")
    def test_error_status_raises(self, mock_request):
        mock_response = Mock(status_code=429)
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=mock_response)
        mock_request.return_value = mock_response

        with pytest.raises(requests.exceptions.HTTPError):
            _HttpClient()._request("GET", "https://test.example.com")
        assert mock_request.call_count == 1

    def test_session_used_when_provided(self):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200)

        with patch("requests.request") as mock_request:
            _HttpClient(session=session)._request("POST", "https://test.example.com", json={"a": 1})
            mock_request.assert_not_called()

        session.request.assert_called_once_with("POST", "https://test.example.com", json={"a": 1}, timeout=30.0)

    def test_close_closes_session_once(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)
        client.close()
        client.close()
        session.close.assert_called_once()


class TestAsyncHttpClient:
    """Test the coroutine transport."""

    @pytest.mark.asyncio
    async def test_request_through_shared_client(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as shared:
            client = _AsyncHttpClient(client=shared)
            response = await client._request("GET", "https://test.example.com/x", headers={"A": "b"})

        assert response.json() == {"ok": True}
        assert len(seen) == 1
        assert seen[0].headers["A"] == "b"

    @pytest.mark.asyncio
    async def test_fixed_timeout_and_redirects_passed(self):
        shared = MagicMock(spec=httpx.AsyncClient)
        response = MagicMock(spec=httpx.Response)
        shared.request = AsyncMock(return_value=response)

        await _AsyncHttpClient(client=shared)._request("GET", "https://test.example.com", timeout=1)

        assert shared.request.call_args.kwargs["timeout"] == 30.0
        assert shared.request.call_args.kwargs["follow_redirects"] is True
        response.raise_for_status.assert_called_once()

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        async with httpx.AsyncClient(transport=transport) as shared:
            with pytest.raises(httpx.HTTPStatusError):
                await _AsyncHttpClient(client=shared)._request("GET", "https://test.example.com")

    @pytest.mark.asyncio
    async def test_standalone_client_per_request(self):
        instance = MagicMock()
        instance.__aenter__ = AsyncMock(return_value=instance)
        instance.__aexit__ = AsyncMock(return_value=None)
        instance.request = AsyncMock(return_value=MagicMock(spec=httpx.Response))

        with patch("httpx.AsyncClient", return_value=instance) as factory:
            client = _AsyncHttpClient()
            await client._request("GET", "https://test.example.com")
            await client._request("GET", "https://test.example.com")

        assert factory.call_count == 2
        assert instance.__aexit__.await_count == 2

    @pytest.mark.asyncio
    async def test_aclose(self):
        shared = MagicMock(spec=httpx.AsyncClient)
        shared.aclose = AsyncMock()
        client = _AsyncHttpClient(client=shared)
        await client.aclose()
        await client.aclose()
        shared.aclose.assert_awaited_once()
