"""
Configuración centralizada de variables de entorno usando Pydantic.
Este módulo proporciona validación de tipos y valores por defecto para todas las variables de entorno.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración de la aplicación con validación de tipos usando Pydantic.

    Las variables de entorno se cargan automáticamente y se validan según los tipos definidos.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Configuración de la API de traducción
    translation_api_url: str = Field(
        description="URL base de la API de traducción upstream",
    )

    translation_api_timeout: float = Field(
        default=10.0, gt=0, description="Timeout total de las llamadas upstream en segundos"
    )

    translation_api_connect_timeout: float = Field(
        default=4.0, gt=0, description="Timeout de conexión upstream en segundos"
    )

    # Configuración de la whitelist
    whitelist_refresh_interval_seconds: int = Field(
        default=24 * 60 * 60,
        ge=60,
        description="Intervalo entre refrescos programados de idiomas y dominios",
    )

    # Configuración adicional de la aplicación
    debug: bool = Field(default=False, description="Modo debug de la aplicación")

    host: str = Field(
        default="0.0.0.0", description="Host donde se ejecutará la aplicación"
    )

    api_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Puerto donde se ejecutará la aplicación",
    )

    log_file: Optional[str] = Field(
        default=None, description="Archivo de log (por defecto logs/app.log fuera de debug)"
    )

    @field_validator("translation_api_url")
    @classmethod
    def validate_translation_api_url(cls, v):
        """Valida que la URL upstream sea http(s) y la normaliza sin barra final."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("translation_api_url debe comenzar con http:// o https://")
        return v.rstrip("/")


# Instancia global de configuración
settings = Settings()

# Constantes exportables para importación directa
TRANSLATION_API_URL = settings.translation_api_url
TRANSLATION_API_TIMEOUT = settings.translation_api_timeout
TRANSLATION_API_CONNECT_TIMEOUT = settings.translation_api_connect_timeout

WHITELIST_REFRESH_INTERVAL_SECONDS = settings.whitelist_refresh_interval_seconds

DEBUG = settings.debug
HOST = settings.host
API_PORT = settings.api_port
LOG_FILE = settings.log_file
