"""
Modelos Pydantic para el router de traducción
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    """Solicitud de traducción tal como la reciben el gateway y la API upstream"""

    model_config = ConfigDict(populate_by_name=True)

    source_lang: str = Field(alias="source_language", description="Idioma de origen")
    target_lang: str = Field(alias="target_language", description="Idioma de destino")
    domain: str = Field(description="Dominio de traducción")
    content: str = Field(description="Texto a traducir")

    def to_upstream_payload(self) -> Dict[str, Any]:
        """Cuerpo JSON con los nombres de campo del contrato upstream"""
        return self.model_dump(by_alias=True)
