"""
Tests para el endpoint de traducción validada y el health check
"""

from fastapi.testclient import TestClient

from translation_gateway.services.upstream_client import (
    TranslationAPIRejectedError, TranslationAPITimeoutError,
    TranslationAPIUnavailableError)

URL = "/api/v1/validated-translate"


def body(**overrides):
    payload = {
        "source_language": "eng",
        "target_language": "fra",
        "domain": "general",
        "content": "Hello",
    }
    payload.update(overrides)
    return payload


class TestValidatedTranslate:
    """Tests del endpoint POST /api/v1/validated-translate"""

    def test_success_returns_plain_text(self, client: TestClient):
        response = client.post(URL, json=body())

        assert response.status_code == 200
        assert response.text == "Bonjour"
        assert response.headers["content-type"].startswith("text/plain")
        assert "X-Request-ID" in response.headers

    def test_unsupported_source_language(self, client: TestClient, mock_upstream):
        response = client.post(URL, json=body(source_language="deu"))

        assert response.status_code == 400
        assert response.text == "Unsupported source language: deu"
        mock_upstream.translate.assert_not_awaited()

    def test_unsupported_domain(self, client: TestClient):
        response = client.post(URL, json=body(domain="legal"))

        assert response.status_code == 400
        assert response.text == "Unsupported domain: legal"

    def test_content_too_long(self, client: TestClient):
        response = client.post(URL, json=body(content="word " * 31))

        assert response.status_code == 400
        assert response.text == "Content can't be longer than 30 words"

    def test_upstream_rejection(self, client: TestClient, mock_upstream):
        mock_upstream.translate.side_effect = TranslationAPIRejectedError(
            400, "domain disabled"
        )

        response = client.post(URL, json=body())

        assert response.status_code == 400
        assert response.text == "domain disabled"
        # Refresco de arranque + refresco tras el rechazo
        assert mock_upstream.get_languages.await_count == 2
        assert mock_upstream.get_domains.await_count == 2

    def test_upstream_unavailable(self, client: TestClient, mock_upstream):
        mock_upstream.translate.side_effect = TranslationAPIUnavailableError("down")

        response = client.post(URL, json=body())

        assert response.status_code == 503
        assert response.json()["error"] == "service_unavailable"
        assert mock_upstream.get_languages.await_count == 1

    def test_upstream_timeout(self, client: TestClient, mock_upstream):
        mock_upstream.translate.side_effect = TranslationAPITimeoutError("slow")

        response = client.post(URL, json=body())

        assert response.status_code == 504
        assert response.json()["error"] == "timeout_error"

    def test_missing_field_is_validation_error(self, client: TestClient):
        payload = body()
        del payload["domain"]

        response = client.post(URL, json=payload)

        assert response.status_code == 422

    def test_fails_closed_when_startup_refresh_fails(self, mock_upstream):
        from unittest.mock import patch

        from translation_gateway.main import app

        mock_upstream.get_languages.side_effect = TranslationAPIUnavailableError("down")

        with patch(
            "translation_gateway.main.TranslationAPIClient", return_value=mock_upstream
        ):
            with TestClient(app) as cold_client:
                response = cold_client.post(URL, json=body())

        assert response.status_code == 400
        assert response.text == "Unsupported source language: eng"


class TestHealth:
    """Tests del endpoint de health check"""

    def test_health_reports_whitelist(self, client: TestClient):
        response = client.get("/health/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "translation-gateway"
        assert data["languages"] == 2
        assert data["domains"] == 1
        assert data["last_refreshed_at"] is not None

    def test_health_degraded_without_languages(self, mock_upstream):
        from unittest.mock import patch

        from translation_gateway.main import app

        mock_upstream.get_languages.return_value = []

        with patch(
            "translation_gateway.main.TranslationAPIClient", return_value=mock_upstream
        ):
            with TestClient(app) as cold_client:
                data = cold_client.get("/health/health").json()

        assert data["status"] == "degraded"
        assert data["languages"] == 0
