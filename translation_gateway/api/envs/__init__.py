"""
Módulo de configuración de variables de entorno.
Exporta todas las variables de entorno validadas como constantes.
"""

from .env import (  # Instancia de configuración; Variables de la API upstream; Variables de la aplicación
    API_PORT, DEBUG, HOST, LOG_FILE, TRANSLATION_API_CONNECT_TIMEOUT,
    TRANSLATION_API_TIMEOUT, TRANSLATION_API_URL,
    WHITELIST_REFRESH_INTERVAL_SECONDS, settings)

__all__ = [
    # Variables de la API upstream
    "TRANSLATION_API_URL",
    "TRANSLATION_API_TIMEOUT",
    "TRANSLATION_API_CONNECT_TIMEOUT",
    # Variables de la whitelist
    "WHITELIST_REFRESH_INTERVAL_SECONDS",
    # Variables de la aplicación
    "DEBUG",
    "HOST",
    "API_PORT",
    "LOG_FILE",
    "settings",
]
