"""Health - Endpoint básico de health check"""

from datetime import datetime

from fastapi import APIRouter, Request

from ..models.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    Endpoint básico de health check

    Returns:
        HealthResponse: Estado del servicio y tamaño de la whitelist
    """
    store = getattr(request.app.state, "whitelist_store", None)
    snapshot = store.snapshot if store is not None else None

    # Sin idiomas o dominios todas las solicitudes se rechazan
    ready = snapshot is not None and bool(snapshot.languages) and bool(snapshot.domains)

    return HealthResponse(
        status="healthy" if ready else "degraded",
        timestamp=datetime.now(),
        service="translation-gateway",
        languages=len(snapshot.languages) if snapshot else 0,
        domains=len(snapshot.domains) if snapshot else 0,
        last_refreshed_at=store.last_refreshed_at if store else None,
    )
