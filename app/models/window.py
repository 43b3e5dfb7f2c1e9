from pydantic import BaseModel


UNKNOWN_WINDOW = "unknown"


class Window(BaseModel):
    """Mitad de temporada: rango inclusivo de carreras con su etiqueta"""

    label: str  # 1H | 2H
    min_race: int
    max_race: int

    class Config:
        frozen = True

    def contains(self, race_no: int) -> bool:
        return self.min_race <= race_no <= self.max_race
