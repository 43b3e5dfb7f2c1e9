"""
Controlador de equipos - Selector, historial de picks y charts
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import Standings
from app.services.team_service import (
    RunningTotalsChart,
    TeamDetail,
    TeamOption,
    TeamService,
    TeamNotFoundError,
)


router = APIRouter(tags=["teams"])


@router.get("/teams", response_model=list[TeamOption])
async def list_teams(model: Standings):
    """
    Obtener los equipos en orden de la tabla ("1. Nombre").
    """
    return TeamService(model).get_options()


@router.get("/teams/{team_id}", response_model=TeamDetail)
async def get_team(team_id: str, model: Standings):
    """
    Obtener el detalle de un equipo: totales, historial y running total.
    """
    team_service = TeamService(model)

    try:
        return team_service.get_detail(team_id)
    except TeamNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.get("/charts/top5", response_model=RunningTotalsChart)
async def get_top5_chart(model: Standings):
    """
    Obtener el running total de los 5 primeros de la tabla.
    """
    return TeamService(model).get_top_chart()
