"""
Controlador de info - Datos de la quiniela para el header y el modal de pago
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.dependencies import AppSettings, Store
from app.models.window import Window


router = APIRouter(prefix="/info", tags=["info"])


class PoolInfoResponse(BaseModel):
    season_label: str
    buy_in_usd: int

    # None = link no configurado (el front lo deshabilita)
    venmo_url: Optional[str] = None
    cash_app_url: Optional[str] = None
    signup_form_url: Optional[str] = None
    signup_embed_url: Optional[str] = None
    weekly_pick_form_url: Optional[str] = None

    halves: list[Window]
    auto_zero_duplicates: bool
    last_update: Optional[datetime] = None


def _link(url: str) -> Optional[str]:
    url = (url or "").strip()
    return url or None


@router.get("", response_model=PoolInfoResponse)
async def get_pool_info(settings: AppSettings, store: Store):
    """
    Obtener la configuración pública de la quiniela.
    """
    return PoolInfoResponse(
        season_label=settings.season_label,
        buy_in_usd=settings.buy_in_usd,
        venmo_url=_link(settings.venmo_url),
        cash_app_url=_link(settings.cash_app_url),
        signup_form_url=_link(settings.signup_form_url),
        signup_embed_url=_link(settings.signup_embed_url),
        weekly_pick_form_url=_link(settings.weekly_pick_form_url),
        halves=settings.windows(),
        auto_zero_duplicates=settings.auto_zero_duplicates,
        last_update=store.loaded_at,
    )
