from typing import Literal, Optional

from pydantic import BaseModel, PrivateAttr

from app.models.result import Number


FlagType = Literal["miss", "dup"]


class CellFlag(BaseModel):
    type: FlagType
    label: str


MISS_FLAG = CellFlag(type="miss", label="No pick → 0")
DUP_FLAG = CellFlag(type="dup", label="Duplicate in half")


class ScoringCell(BaseModel):
    """Resultado resuelto de un equipo en una carrera"""

    race_no: int
    half: str

    team_id: str
    team_name: str

    car_no: Optional[int] = None
    points: Number = 0
    win: bool = False
    top5: bool = False
    finish_pos: Optional[int] = None

    flags: list[CellFlag] = []

    def has_flag(self, flag_type: FlagType) -> bool:
        return any(f.type == flag_type for f in self.flags)

    @property
    def is_miss(self) -> bool:
        return self.has_flag("miss")

    @property
    def is_dup(self) -> bool:
        return self.has_flag("dup")


class ParticipantAggregate(BaseModel):
    """Totales acumulados de un equipo (resultado agregado de sus celdas)"""

    team_id: str
    team_name: str
    contact: str = ""
    paid: bool = False

    total_points: Number = 0
    wins_picked: int = 0
    top5s_picked: int = 0
    flags_dup: int = 0
    flags_miss: int = 0

    points_by_race: dict[int, Number] = {}

    # Se asignan al ordenar
    rank: int = 0
    behind: Number = 0

    def running_totals(self, races: list[int]) -> list[Number]:
        """Suma acumulada de puntos carrera a carrera (para los charts)"""
        running = 0
        series = []
        for race_no in races:
            running += self.points_by_race.get(race_no, 0)
            series.append(running)
        return series


class StandingsModel(BaseModel):
    """
    Modelo derivado completo.

    Se reconstruye desde cero en cada carga; nunca se actualiza de forma
    incremental.
    """

    races: list[int] = []
    last_race: Optional[int] = None

    cells: list[ScoringCell] = []
    ranked: list[ParticipantAggregate] = []
    stats: dict[str, ParticipantAggregate] = {}

    _grid: dict[tuple[str, int], ScoringCell] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        self._grid = {(c.team_id, c.race_no): c for c in self.cells}

    def cell(self, team_id: str, race_no: int) -> Optional[ScoringCell]:
        return self._grid.get((team_id, race_no))

    def cells_for_race(self, race_no: int) -> list[ScoringCell]:
        return [c for c in self.cells if c.race_no == race_no]

    def cells_for_team(self, team_id: str) -> list[ScoringCell]:
        rows = [c for c in self.cells if c.team_id == team_id]
        return sorted(rows, key=lambda c: c.race_no)
