"""Cliente HTTP para comunicación con la API de traducción upstream"""

import logging
import time
from typing import Any, Dict, List, Optional

import httpx

from ..utils.logging_config import LoggerMixin

logger = logging.getLogger(__name__)


class TranslationAPIError(Exception):
    """Error base de la API de traducción"""

    pass


class TranslationAPIRejectedError(TranslationAPIError):
    """La API rechazó la solicitud con un estado 4xx"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TranslationAPIUnavailableError(TranslationAPIError):
    """Error de conexión o del servidor de la API"""

    pass


class TranslationAPITimeoutError(TranslationAPIUnavailableError):
    """Timeout en la comunicación con la API"""

    pass


class TranslationAPIResponseError(TranslationAPIError):
    """La API devolvió un cuerpo con formato inesperado"""

    pass


class TranslationAPIClient(LoggerMixin):
    """Cliente para los endpoints translate, languages y domains de la API upstream"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        connect_timeout: float = 4.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Inicializa el cliente de traducción

        Args:
            base_url: URL base de la API upstream
            timeout: Timeout total por llamada en segundos
            connect_timeout: Timeout de conexión en segundos
            transport: Transporte httpx alternativo (tests)
        """
        self.base_url = base_url.rstrip("/")

        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            transport=transport,
        )

        self.log_operation("client_initialized", base_url=self.base_url)

    async def __aenter__(self):
        """Entrada del context manager"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Salida del context manager"""
        await self.close()

    async def close(self):
        """Cierra el cliente HTTP"""
        await self.client.aclose()
        logger.info("Cliente de traducción cerrado")

    def _check_status(self, response: httpx.Response) -> None:
        """
        Convierte estados HTTP no exitosos en excepciones del cliente

        Raises:
            TranslationAPIRejectedError: Estado 4xx, con el cuerpo como mensaje
            TranslationAPIUnavailableError: Estado 5xx u otro no exitoso
        """
        if response.is_success:
            return

        if 400 <= response.status_code < 500:
            error = TranslationAPIRejectedError(response.status_code, response.text)
            self.log_error(
                "client_error",
                error,
                exc_info=False,
                status_code=response.status_code,
                endpoint=str(response.url),
            )
            raise error

        error = TranslationAPIUnavailableError(
            f"Error del servidor de traducción: {response.status_code}"
        )
        self.log_error(
            "server_error",
            error,
            exc_info=False,
            status_code=response.status_code,
            endpoint=str(response.url),
        )
        raise error

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Ejecuta la llamada y normaliza errores de transporte"""
        url = f"{self.base_url}{path}"
        start_time = time.time()

        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            self.log_error("request_timeout", e, exc_info=False, endpoint=url)
            raise TranslationAPITimeoutError(f"Timeout llamando a {path}") from e
        except httpx.HTTPError as e:
            self.log_error("request_connection", e, exc_info=False, endpoint=url)
            raise TranslationAPIUnavailableError(
                f"No se pudo conectar con la API de traducción: {e}"
            ) from e

        duration_ms = (time.time() - start_time) * 1000
        self.log_performance(
            f"{method.lower()}{path.replace('/', '_')}",
            duration_ms,
            status_code=response.status_code,
        )

        self._check_status(response)
        return response

    async def _get_string_list(self, path: str) -> List[str]:
        response = await self._request("GET", path)

        try:
            data: Any = response.json()
        except ValueError as e:
            raise TranslationAPIResponseError(f"{path} no devolvió JSON válido") from e

        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise TranslationAPIResponseError(
                f"{path} debe devolver una lista de strings"
            )
        return data

    async def get_languages(self) -> List[str]:
        """
        Obtiene los códigos de idioma soportados

        Returns:
            Lista de códigos de idioma
        """
        return await self._get_string_list("/languages")

    async def get_domains(self) -> List[str]:
        """
        Obtiene los dominios de traducción soportados

        Returns:
            Lista de nombres de dominio
        """
        return await self._get_string_list("/domains")

    async def translate(self, payload: Dict[str, Any]) -> str:
        """
        Envía una solicitud de traducción

        Args:
            payload: Cuerpo JSON de la solicitud, reenviado sin cambios

        Returns:
            Texto traducido tal como lo devuelve la API
        """
        response = await self._request("POST", "/translate", json=payload)
        return response.text
