"""Tests unitarios para el cliente HTTP de geocodificación."""

import asyncio
from unittest.mock import patch

import aiohttp
import pytest

from app.db.geocoding_client import GeocodingClient
from app.utils.error_handler import AddressLookupException, ErrorCode

BASE_URL = "https://geo.test/search/"


class FakeResponse:
    """Respuesta mínima compatible con aiohttp usada como context manager."""

    def __init__(self, status=200, body=None, json_error=None):
        self.status = status
        self.url = BASE_URL
        self._body = body
        self._json_error = json_error

    async def json(self, content_type="application/json"):
        if self._json_error:
            raise self._json_error
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Sesión que devuelve una respuesta fija o lanza un error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if self.error:
            raise self.error
        return self.response

    async def close(self):
        pass


def make_client(session) -> GeocodingClient:
    client = GeocodingClient(base_url=BASE_URL)
    client.session = session
    return client


class TestGeocodingClientSearch:
    """Tests para GeocodingClient.search."""

    @pytest.mark.asyncio
    async def test_search_sends_query_city_and_postcode(self, geocoding_body):
        session = FakeSession(response=FakeResponse(body=geocoding_body()))
        client = make_client(session)

        body = await client.search("20 avenue de Segur", "Paris", "75007")

        assert body["features"][0]["properties"]["name"] == "20 Avenue de Segur"
        assert session.calls == [(BASE_URL, {"q": "20 avenue de Segur", "city": "Paris", "postcode": "75007"})]

    @pytest.mark.asyncio
    async def test_search_logs_api_call(self, geocoding_body):
        client = make_client(FakeSession(response=FakeResponse(body=geocoding_body())))

        with patch("app.db.geocoding_client.log_api_call") as mock_log:
            await client.search("a", "b", "c")

        mock_log.assert_called_once()
        assert mock_log.call_args.args[:3] == ("GET", BASE_URL, 200)

    @pytest.mark.asyncio
    async def test_non_2xx_status_raises_lookup_error(self):
        client = make_client(FakeSession(response=FakeResponse(status=503, body={})))

        with pytest.raises(AddressLookupException) as exc_info:
            await client.search("a", "b", "c")

        assert exc_info.value.api_response_code == 503
        assert exc_info.value.error_code == ErrorCode.GEOCODING_API_ERROR
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_connection_error_raises_lookup_error(self):
        client = make_client(FakeSession(error=aiohttp.ClientConnectionError("refused")))

        with pytest.raises(AddressLookupException) as exc_info:
            await client.search("a", "b", "c")

        assert "Network error" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_raises_lookup_error(self):
        client = make_client(FakeSession(error=asyncio.TimeoutError()))

        with pytest.raises(AddressLookupException):
            await client.search("a", "b", "c")

    @pytest.mark.asyncio
    async def test_invalid_json_raises_lookup_error(self):
        response = FakeResponse(json_error=ValueError("Expecting value"))
        client = make_client(FakeSession(response=response))

        with pytest.raises(AddressLookupException) as exc_info:
            await client.search("a", "b", "c")

        assert "Malformed" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_non_object_body_raises_lookup_error(self):
        client = make_client(FakeSession(response=FakeResponse(body=["not", "an", "object"])))

        with pytest.raises(AddressLookupException):
            await client.search("a", "b", "c")

    @pytest.mark.asyncio
    async def test_search_without_session_raises(self):
        client = GeocodingClient(base_url=BASE_URL)

        with pytest.raises(AddressLookupException):
            await client.search("a", "b", "c")


class TestGeocodingClientLifecycle:
    """Tests para apertura y cierre de la sesión."""

    @pytest.mark.asyncio
    async def test_context_manager_opens_and_closes_session(self):
        async with GeocodingClient(base_url=BASE_URL) as client:
            assert isinstance(client.session, aiohttp.ClientSession)
            session = client.session

        assert client.session is None
        assert session.closed

    def test_default_base_url_comes_from_settings(self):
        client = GeocodingClient()
        assert client.base_url == "https://api-adresse.data.gouv.fr/search/"
