from typing import Optional
from pydantic import BaseModel


class Pick(BaseModel):
    """Elección de un equipo para una carrera"""

    race_no: int
    half: str

    team_id: str
    team_name: str  # cae al team_id si el equipo no existe

    car_no: Optional[int] = None  # None = no eligió coche

    class Config:
        frozen = True
