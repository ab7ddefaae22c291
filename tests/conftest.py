"""
Configuración global de pytest y fixtures compartidos
"""

import os
import sys
from typing import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Cargar variables de entorno de test antes de importar la app
test_env_path = os.path.join(os.path.dirname(__file__), ".env.test")
load_dotenv(test_env_path, override=True)

# Agregar el directorio padre al path para importar la app
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from translation_gateway.api.models.translate import TranslateRequest  # noqa: E402
from translation_gateway.main import app  # noqa: E402
from translation_gateway.services.gateway import TranslationGateway  # noqa: E402
from translation_gateway.services.whitelist import (  # noqa: E402
    WhitelistSnapshot, WhitelistStore)


@pytest.fixture
def mock_upstream():
    """Mock del cliente de la API de traducción"""
    mock = MagicMock()
    mock.get_languages = AsyncMock(return_value=["eng", "fra"])
    mock.get_domains = AsyncMock(return_value=["general"])
    mock.translate = AsyncMock(return_value="Bonjour")
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def store(mock_upstream) -> WhitelistStore:
    """Whitelist con eng, fra y general ya cargados"""
    whitelist = WhitelistStore(mock_upstream)
    whitelist._snapshot = WhitelistSnapshot(
        languages=frozenset({"eng", "fra"}), domains=frozenset({"general"})
    )
    return whitelist


@pytest.fixture
def gateway(mock_upstream, store) -> TranslationGateway:
    return TranslationGateway(mock_upstream, store)


@pytest.fixture
def valid_request() -> TranslateRequest:
    return TranslateRequest(
        source_language="eng", target_language="fra", domain="general", content="Hello"
    )


@pytest.fixture
def client(mock_upstream) -> Generator[TestClient, None, None]:
    """Cliente de prueba para FastAPI con la API upstream simulada"""
    with patch(
        "translation_gateway.main.TranslationAPIClient", return_value=mock_upstream
    ):
        with TestClient(app) as test_client:
            yield test_client
