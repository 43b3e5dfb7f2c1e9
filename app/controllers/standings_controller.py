"""
Controlador de standings - Tabla general de la quiniela

El modelo se calcula al cargar las hojas; este controlador solo lo sirve.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.core.dependencies import Standings, Store
from app.models.result import Number
from app.standings_store import StandingsLoadError


router = APIRouter(prefix="/standings", tags=["standings"])


class StandingsEntryResponse(BaseModel):
    """Fila de la tabla general (equipo y estadísticas)."""
    rank: int
    team_id: str
    team_name: str
    total_points: Number
    behind: Number
    wins_picked: int
    top5s_picked: int
    paid: bool
    flags_dup: int
    flags_miss: int


class StandingsResponse(BaseModel):
    races: list[int]
    last_race: Optional[int] = None
    entries: list[StandingsEntryResponse]


class ReloadResponse(BaseModel):
    teams: int
    races: int
    last_race: Optional[int] = None


@router.get("", response_model=StandingsResponse)
async def get_standings(
    model: Standings,
    q: Optional[str] = Query(None, description="Filter by team name")
):
    """
    Obtener la tabla general ordenada por puntos.

    Desempates: wins picked, top-5s picked y por último team_id.
    """
    query = (q or "").strip().lower()
    ranked = [t for t in model.ranked if not query or query in t.team_name.lower()]

    return StandingsResponse(
        races=model.races,
        last_race=model.last_race,
        entries=[
            StandingsEntryResponse(
                rank=t.rank,
                team_id=t.team_id,
                team_name=t.team_name,
                total_points=t.total_points,
                behind=t.behind,
                wins_picked=t.wins_picked,
                top5s_picked=t.top5s_picked,
                paid=t.paid,
                flags_dup=t.flags_dup,
                flags_miss=t.flags_miss,
            )
            for t in ranked
        ]
    )


@router.post("/reload", response_model=ReloadResponse)
async def reload_standings(store: Store):
    """
    Volver a descargar las hojas y recalcular todo.
    """
    try:
        model = await store.load()
    except StandingsLoadError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )

    return ReloadResponse(
        teams=len(model.ranked),
        races=len(model.races),
        last_race=model.last_race,
    )
