"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.dependencies import Store


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    standings: str  # loaded | not_loaded
    races: int
    loaded_at: Optional[datetime] = None
    last_error: Optional[str] = None


@router.get("/health", response_model=HealthResponse)
async def health_check(store: Store):
    """
    Endpoint de verificación de estado.

    Comprueba que la API esté en funcionamiento y si las hojas se cargaron.
    """
    return HealthResponse(
        status="ok",
        standings="loaded" if store.is_loaded else "not_loaded",
        races=len(store.model.races) if store.model is not None else 0,
        loaded_at=store.loaded_at,
        last_error=store.last_error,
    )
