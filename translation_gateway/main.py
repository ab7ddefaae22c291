import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.envs.env import (DEBUG, TRANSLATION_API_CONNECT_TIMEOUT,
                           TRANSLATION_API_TIMEOUT, TRANSLATION_API_URL,
                           WHITELIST_REFRESH_INTERVAL_SECONDS)
from .api.v1.health import router as health_router
from .api.v1.translate import router as translate_router
from .middleware import ErrorHandlerMiddleware
from .services.gateway import TranslationGateway
from .services.upstream_client import TranslationAPIClient
from .services.whitelist import WhitelistStore, run_periodic_refresh
from .utils.logging_config import get_logger, init_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gestión del ciclo de vida de la aplicación
    """
    # Startup
    init_logging()
    logger.info("Starting Translation Gateway...")

    client = TranslationAPIClient(
        TRANSLATION_API_URL,
        timeout=TRANSLATION_API_TIMEOUT,
        connect_timeout=TRANSLATION_API_CONNECT_TIMEOUT,
    )
    store = WhitelistStore(client)

    # Si falla, la whitelist queda vacía y se rechazan todas las solicitudes
    # hasta el siguiente refresco
    snapshot = await store.refresh()
    if not snapshot.languages or not snapshot.domains:
        logger.warning("Whitelist incompleta tras el arranque; se rechazarán solicitudes")

    app.state.whitelist_store = store
    app.state.gateway = TranslationGateway(client, store)

    app.state.refresh_task = asyncio.create_task(
        run_periodic_refresh(store, WHITELIST_REFRESH_INTERVAL_SECONDS)
    )

    yield
    # Shutdown
    task: Optional[asyncio.Task] = getattr(app.state, "refresh_task", None)
    if task:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
    logger.info("Closing translation API client...")
    await client.close()
    logger.info("API successfully shutdown")


app = FastAPI(
    title="Translation Gateway",
    description="Proxy de validación para la API de traducción",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc" if DEBUG else None,
    openapi_url="/openapi.json",
)

app.add_middleware(ErrorHandlerMiddleware)

app.include_router(health_router, prefix="/health")
app.include_router(translate_router, prefix="/api/v1")

if __name__ == "__main__":
    import uvicorn

    from .api.envs import API_PORT, HOST

    uvicorn.run(
        "translation_gateway.main:app",
        host=HOST,
        port=API_PORT,
        log_level="info",
        server_header=False,
        date_header=False,
    )
