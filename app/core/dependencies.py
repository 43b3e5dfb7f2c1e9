"""
Dependencies de FastAPI para inyectar el store, el modelo y la configuración
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from app.core.config import Settings, get_settings
from app.models.standings import StandingsModel
from app.standings_store import StandingsStore, StandingsNotLoadedError


def get_store(request: Request) -> StandingsStore:
    """Retorna el store de la app (creado en el lifespan)"""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Standings store not initialized",
        )
    return store


def get_standings(
    store: Annotated[StandingsStore, Depends(get_store)]
) -> StandingsModel:
    """
    Dependency que entrega el modelo de standings ya calculado.

    Si todavía no hubo una carga exitosa responde 503 con el último error.
    """
    try:
        return store.get_model()
    except StandingsNotLoadedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )


# Alias de tipos para que se vea mas limpio en los endpoints
Store = Annotated[StandingsStore, Depends(get_store)]
Standings = Annotated[StandingsModel, Depends(get_standings)]
AppSettings = Annotated[Settings, Depends(get_settings)]
