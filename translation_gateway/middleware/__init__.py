"""
Módulo de middleware para la aplicación FastAPI
"""

from .error_handler import ErrorHandlerMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
]
