"""
Tests para el cliente HTTP de la API de traducción
"""

import json

import httpx
import pytest

from translation_gateway.services.upstream_client import (
    TranslationAPIClient, TranslationAPIRejectedError,
    TranslationAPIResponseError, TranslationAPITimeoutError,
    TranslationAPIUnavailableError)

BASE_URL = "http://translation-api.test"


def make_client(handler) -> TranslationAPIClient:
    return TranslationAPIClient(BASE_URL + "/", transport=httpx.MockTransport(handler))


class TestListEndpoints:
    """Tests de los endpoints languages y domains"""

    @pytest.mark.asyncio
    async def test_get_languages(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert str(request.url) == f"{BASE_URL}/languages"
            return httpx.Response(200, json=["eng", "fra"])

        async with make_client(handler) as client:
            assert await client.get_languages() == ["eng", "fra"]

    @pytest.mark.asyncio
    async def test_get_domains(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/domains"
            return httpx.Response(200, json=["general"])

        async with make_client(handler) as client:
            assert await client.get_domains() == ["general"]

    @pytest.mark.asyncio
    async def test_non_json_body_is_malformed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="eng,fra")

        async with make_client(handler) as client:
            with pytest.raises(TranslationAPIResponseError):
                await client.get_languages()

    @pytest.mark.asyncio
    async def test_non_string_items_are_malformed(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"languages": ["eng"]})

        async with make_client(handler) as client:
            with pytest.raises(TranslationAPIResponseError):
                await client.get_languages()

    @pytest.mark.asyncio
    async def test_server_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal")

        async with make_client(handler) as client:
            with pytest.raises(TranslationAPIUnavailableError):
                await client.get_domains()


class TestTranslateEndpoint:
    """Tests del endpoint translate"""

    @pytest.mark.asyncio
    async def test_translate_forwards_payload_and_returns_raw_text(self):
        payload = {
            "source_language": "eng",
            "target_language": "fra",
            "domain": "general",
            "content": "Hello",
        }

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert request.url.path == "/translate"
            assert json.loads(request.content) == payload
            return httpx.Response(200, text="Bonjour")

        async with make_client(handler) as client:
            assert await client.translate(payload) == "Bonjour"

    @pytest.mark.asyncio
    async def test_client_error_is_rejection_with_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, text="domain disabled")

        async with make_client(handler) as client:
            with pytest.raises(TranslationAPIRejectedError) as exc_info:
                await client.translate({})

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "domain disabled"

    @pytest.mark.asyncio
    async def test_connection_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TranslationAPIUnavailableError):
                await client.translate({})

    @pytest.mark.asyncio
    async def test_timeout_is_timeout_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        async with make_client(handler) as client:
            with pytest.raises(TranslationAPITimeoutError):
                await client.translate({})
