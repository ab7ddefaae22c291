"""Validación y reenvío de solicitudes de traducción"""

from ..api.models.translate import TranslateRequest
from ..utils.logging_config import LoggerMixin
from .upstream_client import (TranslationAPIClient, TranslationAPIRejectedError,
                              TranslationAPITimeoutError,
                              TranslationAPIUnavailableError)
from .whitelist import WhitelistStore

MAX_CONTENT_WORDS = 30


class InvalidTranslationRequestError(Exception):
    """Solicitud rechazada y corregible por el cliente (HTTP 400)"""

    pass


class UnsupportedLanguageError(InvalidTranslationRequestError):
    """Idioma fuera de la whitelist"""

    def __init__(self, role: str, value: str):
        super().__init__(f"Unsupported {role} language: {value}")
        self.role = role
        self.value = value


class UnsupportedDomainError(InvalidTranslationRequestError):
    """Dominio fuera de la whitelist"""

    def __init__(self, value: str):
        super().__init__(f"Unsupported domain: {value}")
        self.value = value


class ContentTooLongError(InvalidTranslationRequestError):
    """El contenido supera el máximo de palabras"""

    def __init__(self, max_words: int = MAX_CONTENT_WORDS):
        super().__init__(f"Content can't be longer than {max_words} words")
        self.max_words = max_words


class UpstreamRejectedError(InvalidTranslationRequestError):
    """La API upstream rechazó una solicitud que pasó la validación local"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamUnavailableError(Exception):
    """Fallo de infraestructura al llamar a la API upstream"""

    pass


class UpstreamTimeoutError(UpstreamUnavailableError):
    """La API upstream no respondió dentro del timeout"""

    pass


class TranslationGateway(LoggerMixin):
    """Valida solicitudes contra la whitelist y las reenvía a la API upstream"""

    def __init__(
        self,
        client: TranslationAPIClient,
        store: WhitelistStore,
        max_words: int = MAX_CONTENT_WORDS,
    ):
        self.client = client
        self.store = store
        self.max_words = max_words

    def validate(self, request: TranslateRequest) -> None:
        """
        Valida la solicitud contra un único snapshot de la whitelist

        Raises:
            UnsupportedLanguageError: Idioma de origen o destino no soportado
            UnsupportedDomainError: Dominio no soportado
            ContentTooLongError: Más de `max_words` palabras
        """
        snapshot = self.store.snapshot

        if not snapshot.supports_language(request.source_lang):
            raise UnsupportedLanguageError("source", request.source_lang)
        if not snapshot.supports_language(request.target_lang):
            raise UnsupportedLanguageError("target", request.target_lang)
        if not snapshot.supports_domain(request.domain):
            raise UnsupportedDomainError(request.domain)
        if len(request.content.split()) > self.max_words:
            raise ContentTooLongError(self.max_words)

    async def handle(self, request: TranslateRequest) -> str:
        """
        Valida la solicitud y la traduce

        Args:
            request: Solicitud de traducción

        Returns:
            Texto traducido devuelto por la API upstream

        Raises:
            InvalidTranslationRequestError: Validación local o rechazo upstream
            UpstreamUnavailableError: La API upstream no respondió correctamente
        """
        self.validate(request)
        return await self._translate(request)

    async def _translate(self, request: TranslateRequest) -> str:
        try:
            return await self.client.translate(request.to_upstream_payload())
        except TranslationAPIRejectedError as e:
            self.logger.error(
                f"Failed to translate {request!r}, api responded with error message {e.message}",
                extra={"operation": "translate", "status_code": e.status_code},
            )
            # La whitelist local puede estar desactualizada
            await self.store.refresh()
            raise UpstreamRejectedError(e.message) from e
        except TranslationAPITimeoutError as e:
            self.log_error("translate", e, exc_info=False)
            raise UpstreamTimeoutError(str(e)) from e
        except TranslationAPIUnavailableError as e:
            self.log_error("translate", e, exc_info=False)
            raise UpstreamUnavailableError(str(e)) from e
