"""Whitelist de idiomas y dominios soportados, sincronizada con la API upstream"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, FrozenSet, Iterable, List, Optional

from ..utils.logging_config import LoggerMixin, get_logger
from .upstream_client import TranslationAPIClient

logger = get_logger(__name__)


class RefreshFetchFailed(Exception):
    """Falló la descarga de uno de los conjuntos; el conjunto previo se conserva"""

    def __init__(self, resource: str, cause: Exception):
        super().__init__(f"No se pudo actualizar {resource}: {cause}")
        self.resource = resource
        self.cause = cause


@dataclass(frozen=True)
class WhitelistSnapshot:
    """Copia inmutable de los conjuntos soportados en un instante dado"""

    languages: FrozenSet[str] = field(default_factory=frozenset)
    domains: FrozenSet[str] = field(default_factory=frozenset)

    def supports_language(self, code: str) -> bool:
        return code in self.languages

    def supports_domain(self, name: str) -> bool:
        return name in self.domains


class WhitelistStore(LoggerMixin):
    """
    Mantiene la whitelist vigente.

    Cada refresco construye un snapshot nuevo y lo asigna de una sola vez;
    los lectores siempre ven un snapshot completo.
    """

    def __init__(self, client: TranslationAPIClient):
        self._client = client
        self._snapshot = WhitelistSnapshot()
        self.last_refreshed_at: Optional[datetime] = None

    @property
    def snapshot(self) -> WhitelistSnapshot:
        return self._snapshot

    def supports_language(self, code: str) -> bool:
        return self._snapshot.supports_language(code)

    def supports_domain(self, name: str) -> bool:
        return self._snapshot.supports_domain(name)

    async def _fetch(
        self, resource: str, fetch: Callable[[], Awaitable[List[str]]]
    ) -> Optional[FrozenSet[str]]:
        try:
            values: Iterable[str] = await fetch()
            return frozenset(values)
        except Exception as e:
            self.log_error(
                "whitelist_refresh", RefreshFetchFailed(resource, e), exc_info=False
            )
            return None

    async def refresh(self) -> WhitelistSnapshot:
        """
        Descarga idiomas y dominios de la API upstream.

        Las dos descargas son independientes: si una falla, su conjunto
        conserva el valor anterior y la otra se aplica igualmente. Nunca
        lanza excepciones.

        Returns:
            El snapshot vigente tras el refresco
        """
        languages, domains = await asyncio.gather(
            self._fetch("languages", self._client.get_languages),
            self._fetch("domains", self._client.get_domains),
        )

        # Sin await entre la lectura y la asignación
        current = self._snapshot
        self._snapshot = WhitelistSnapshot(
            languages=current.languages if languages is None else languages,
            domains=current.domains if domains is None else domains,
        )

        if languages is not None:
            logger.info(f"supportedLanguages actualizados: {sorted(languages)}")
        if domains is not None:
            logger.info(f"supportedDomains actualizados: {sorted(domains)}")
        if languages is not None or domains is not None:
            self.last_refreshed_at = datetime.now(timezone.utc)

        return self._snapshot


async def run_periodic_refresh(store: WhitelistStore, interval_seconds: float) -> None:
    """Refresca la whitelist cada `interval_seconds` hasta ser cancelada."""
    while True:
        await asyncio.sleep(interval_seconds)
        logger.info("Refresco programado de la whitelist")
        await store.refresh()
