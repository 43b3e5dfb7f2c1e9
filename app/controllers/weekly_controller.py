"""
Controlador semanal - Desglose de una carrera y movers
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import AppSettings, Standings
from app.services.movers_service import Movers
from app.services.weekly_service import (
    WeeklyBreakdown,
    WeeklyService,
    RaceNotFoundError,
)


router = APIRouter(prefix="/weekly", tags=["weekly"])


def _not_found(e: RaceNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(e)
    )


@router.get("", response_model=WeeklyBreakdown)
async def get_latest_week(model: Standings, settings: AppSettings):
    """
    Obtener el desglose de la última carrera con datos.
    """
    weekly_service = WeeklyService(model, settings.windows())

    try:
        return weekly_service.get_breakdown()
    except RaceNotFoundError as e:
        raise _not_found(e)


@router.get("/{race_no}", response_model=WeeklyBreakdown)
async def get_week(race_no: int, model: Standings, settings: AppSettings):
    """
    Obtener el desglose de una carrera: picks, high/low score, flags y movers.
    """
    weekly_service = WeeklyService(model, settings.windows())

    try:
        return weekly_service.get_breakdown(race_no)
    except RaceNotFoundError as e:
        raise _not_found(e)


@router.get("/{race_no}/movers", response_model=Movers)
async def get_movers(race_no: int, model: Standings, settings: AppSettings):
    """
    Obtener el biggest mover y el hard luck de una carrera.
    """
    weekly_service = WeeklyService(model, settings.windows())

    try:
        return weekly_service.get_movers(race_no)
    except RaceNotFoundError as e:
        raise _not_found(e)
