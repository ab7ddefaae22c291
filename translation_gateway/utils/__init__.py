"""
Utilidades de la aplicación
"""

from .logging_config import LoggerMixin, get_logger, init_logging, setup_logging

__all__ = [
    "setup_logging",
    "init_logging",
    "get_logger",
    "LoggerMixin",
]
