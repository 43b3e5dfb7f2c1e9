"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que cambia de una temporada a otra va aquí: links de las hojas,
estructura de mitades, buy-in y links de pago.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings

from app.models.window import Window


class HalfRange(BaseModel):
    """Rango inclusivo de carreras de una mitad"""
    min_race: int
    max_race: int


class Settings(BaseSettings):
    # Temporada
    season_label: str = "2026"
    buy_in_usd: int = 30

    # Links de pago y formularios (vacío = no se muestra)
    venmo_url: str = ""
    cash_app_url: str = ""
    signup_form_url: str = ""
    signup_embed_url: str = ""  # URL de embed de Google Form (opcional)
    weekly_pick_form_url: str = ""

    # Hojas publicadas como CSV (File → Share → Publish to web → CSV)
    teams_csv_url: Optional[str] = None
    picks_csv_url: Optional[str] = None
    race_points_csv_url: Optional[str] = None
    fetch_timeout_seconds: float = 15.0

    # Estructura de la quiniela - el orden importa, gana el primer rango que encaje
    # En el .env va como JSON: HALVES='{"1H": {"min_race": 1, "max_race": 13}, ...}'
    halves: dict[str, HalfRange] = {
        "1H": HalfRange(min_race=1, max_race=13),
        "2H": HalfRange(min_race=14, max_race=26),
    }

    # Si es True, un coche repetido en la misma mitad vale 0 puntos
    auto_zero_duplicates: bool = True

    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - de dónde pueden venir los requests
    cors_origins: str = "http://localhost:3000"  # URLs separadas por coma

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo

    def windows(self) -> list[Window]:
        """Mitades como Window, en el orden de configuración"""
        return [
            Window(label=label, min_race=rg.min_race, max_race=rg.max_race)
            for label, rg in self.halves.items()
        ]

    def csv_urls(self) -> dict[str, Optional[str]]:
        return {
            "teams": self.teams_csv_url,
            "picks": self.picks_csv_url,
            "race_points": self.race_points_csv_url,
        }


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
