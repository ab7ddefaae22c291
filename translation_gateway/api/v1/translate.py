"""Traducción validada - proxy hacia la API de traducción upstream"""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from ...services.gateway import TranslationGateway
from ..models.translate import TranslateRequest

router = APIRouter(tags=["Traducción"])


def get_gateway(request: Request) -> TranslationGateway:
    """Obtiene el gateway creado en el lifespan de la aplicación"""
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise HTTPException(status_code=503, detail="Gateway de traducción no inicializado")
    return gateway


@router.post("/validated-translate", response_class=PlainTextResponse)
async def validated_translate(
    req: TranslateRequest, gateway: TranslationGateway = Depends(get_gateway)
):
    """
    Valida la solicitud contra la whitelist y la traduce

    Returns:
        Texto traducido en texto plano. Los errores de validación y los rechazos
        upstream llegan como 400 con el mensaje en texto plano.
    """
    return await gateway.handle(req)
