from typing import Optional, Union
from pydantic import BaseModel


Number = Union[int, float]


class ResultEntry(BaseModel):
    """Puntos de un coche en una carrera (clave: race_no + car_no)"""

    race_no: int
    car_no: int

    points: Number = 0
    finish_pos: Optional[int] = None  # None = sin posición, ordena después de todas

    win: bool = False
    top5: bool = False

    class Config:
        frozen = True

    @property
    def key(self) -> tuple[int, int]:
        return (self.race_no, self.car_no)
