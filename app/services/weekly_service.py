"""
WeeklyService - Breakdown of a single race.

Builds the weekly table (every team's cell for one race), the high/low
scores, flag counts and the movers call-out.
"""

from typing import Optional

from pydantic import BaseModel

from app.models.result import Number
from app.models.standings import ScoringCell, StandingsModel
from app.models.window import Window
from app.services.movers_service import Movers, compute_movers
from app.services.window_service import window_for_race


class WeeklyServiceError(Exception):
    """Base exception for weekly service errors."""
    pass


class RaceNotFoundError(WeeklyServiceError):
    """Raised when the race is not part of the season data."""
    pass


class WeeklyRow(BaseModel):
    position: int
    cell: ScoringCell


class ScoreCallout(BaseModel):
    team_id: str
    team_name: str
    points: Number


class WeeklyBreakdown(BaseModel):
    race_no: int
    half: str
    rows: list[WeeklyRow]
    high_score: Optional[ScoreCallout] = None
    low_score: Optional[ScoreCallout] = None
    duplicates: int
    missing: int
    movers: Movers


class WeeklyService:
    def __init__(self, model: StandingsModel, windows: list[Window]):
        self.model = model
        self.windows = windows

    def resolve_race(self, race_no: Optional[int] = None) -> int:
        """Default to the last race; unknown races raise RaceNotFoundError."""
        if race_no is None:
            race_no = self.model.last_race

        if race_no is None or race_no not in self.model.races:
            raise RaceNotFoundError(f"Race {race_no} not found")

        return race_no

    def get_rows(self, race_no: int) -> list[ScoringCell]:
        """Cells for a race, best score first, then team name."""
        return sorted(
            self.model.cells_for_race(race_no),
            key=lambda c: (-c.points, c.team_name.casefold())
        )

    def get_breakdown(self, race_no: Optional[int] = None) -> WeeklyBreakdown:
        race_no = self.resolve_race(race_no)
        rows = self.get_rows(race_no)

        high = rows[0] if rows else None
        low = rows[-1] if rows else None

        return WeeklyBreakdown(
            race_no=race_no,
            half=window_for_race(race_no, self.windows),
            rows=[WeeklyRow(position=idx, cell=c) for idx, c in enumerate(rows, start=1)],
            high_score=self._callout(high),
            low_score=self._callout(low),
            duplicates=sum(1 for c in rows if c.is_dup),
            missing=sum(1 for c in rows if c.is_miss),
            movers=compute_movers(self.model, race_no),
        )

    def get_movers(self, race_no: Optional[int] = None) -> Movers:
        return compute_movers(self.model, self.resolve_race(race_no))

    @staticmethod
    def _callout(cell: Optional[ScoringCell]) -> Optional[ScoreCallout]:
        if cell is None:
            return None
        return ScoreCallout(team_id=cell.team_id, team_name=cell.team_name, points=cell.points)
