"""
Middleware para manejo centralizado de errores
"""

import time
import traceback
import uuid
from typing import Callable

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..services.gateway import (InvalidTranslationRequestError,
                                UpstreamTimeoutError, UpstreamUnavailableError)
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware para manejo centralizado de errores"""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Procesa la request y maneja errores de forma centralizada

        Args:
            request: Request HTTP
            call_next: Siguiente middleware/handler

        Returns:
            Response HTTP con manejo de errores
        """
        start_time = time.time()
        request_id = self._generate_request_id()

        request.state.request_id = request_id

        try:
            logger.info(
                f"Request iniciada: {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                },
            )

            response = await call_next(request)

            duration_ms = (time.time() - start_time) * 1000

            logger.info(
                f"Request completada: {request.method} {request.url.path} - {response.status_code}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            return response

        except Exception as exc:
            duration_ms = (time.time() - start_time) * 1000

            error_response = self._handle_exception(exc, request, request_id, duration_ms)
            error_response.headers["X-Request-ID"] = request_id
            error_response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            return error_response

    def _generate_request_id(self) -> str:
        """Genera un ID único para la request"""
        return str(uuid.uuid4())[:8]

    def _handle_exception(
        self, exc: Exception, request: Request, request_id: str, duration_ms: float
    ) -> Response:
        """
        Convierte excepciones en respuestas HTTP apropiadas

        Args:
            exc: Excepción capturada
            request: Request HTTP
            request_id: ID de la request
            duration_ms: Duración de la request hasta el error

        Returns:
            Response con el error formateado
        """
        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "duration_ms": duration_ms,
        }

        # Errores corregibles por el cliente: el mensaje viaja como texto plano
        if isinstance(exc, InvalidTranslationRequestError):
            logger.warning(f"Solicitud de traducción inválida: {exc}", extra=extra)
            return PlainTextResponse(str(exc), status_code=400)

        logger.error(
            f"Error en request: {request.method} {request.url.path}",
            extra=extra,
            exc_info=True,
        )

        if isinstance(exc, UpstreamTimeoutError):
            return JSONResponse(
                status_code=504,
                content={
                    "error": "timeout_error",
                    "message": "Timeout en comunicación con la API de traducción",
                    "request_id": request_id,
                },
            )

        elif isinstance(exc, UpstreamUnavailableError):
            return JSONResponse(
                status_code=503,
                content={
                    "error": "service_unavailable",
                    "message": "API de traducción no disponible",
                    "request_id": request_id,
                },
            )

        elif isinstance(exc, HTTPException):
            return JSONResponse(
                status_code=exc.status_code,
                content={
                    "error": "http_error",
                    "message": exc.detail,
                    "request_id": request_id,
                },
            )

        # Error genérico del servidor
        logger.critical(
            f"Error no manejado: {type(exc).__name__}",
            extra={"request_id": request_id, "traceback": traceback.format_exc()},
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "Error interno del servidor",
                "detail": "Ha ocurrido un error inesperado",
                "request_id": request_id,
            },
        )
