"""
Modelos Pydantic para el router de Health
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Modelo para respuesta de health check"""

    status: str
    timestamp: datetime
    service: str
    languages: int
    domains: int
    last_refreshed_at: Optional[datetime] = None
