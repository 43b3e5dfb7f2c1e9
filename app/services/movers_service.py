"""
Movers - Rank changes between consecutive races.
"""

from typing import Optional

from pydantic import BaseModel, computed_field

from app.models.standings import StandingsModel
from app.services.model_builder import ranking_key


class MoverEntry(BaseModel):
    team_id: str
    team_name: str
    rank_before: int
    rank_after: int
    delta: int  # positivo = sube en la tabla

    @computed_field
    @property
    def label(self) -> str:
        if self.delta == 0:
            return f"{self.team_name} (no change)"
        if self.delta > 0:
            return f"{self.team_name} (↑{self.delta})"
        return f"{self.team_name} (↓{abs(self.delta)})"


class Movers(BaseModel):
    race_no: int
    previous_race_no: int
    biggest_mover: Optional[MoverEntry] = None
    hard_luck: Optional[MoverEntry] = None
    entries: list[MoverEntry] = []


def ranks_through(model: StandingsModel, race_no: int) -> dict[str, int]:
    """
    Rank every team using only the races up to and including race_no.

    Same ordering as the full leaderboard, applied to cumulative points,
    wins and top-5s.
    """
    totals = {team_id: [0, 0, 0] for team_id in model.stats}

    for cell in model.cells:
        if cell.race_no > race_no or cell.team_id not in totals:
            continue
        t = totals[cell.team_id]
        t[0] += cell.points
        if cell.win:
            t[1] += 1
        if cell.top5:
            t[2] += 1

    order = sorted(totals, key=lambda team_id: ranking_key(*totals[team_id], team_id))
    return {team_id: rank for rank, team_id in enumerate(order, start=1)}


def compute_movers(model: StandingsModel, race_no: int) -> Movers:
    """
    Compare standings before and after race_no.

    "Before" is the standings through race_no - 1 (never below race 1).
    Teams are walked in sheet order and only a strictly better delta replaces
    the current pick, so ties go to the team listed first. A team missing
    from the "before" snapshot counts as unchanged.
    """
    previous = max(1, race_no - 1)
    before = ranks_through(model, previous)
    after = ranks_through(model, race_no)

    entries = []
    for team_id, stats in model.stats.items():
        # ranks_through ranks every team, so both snapshots hold every team_id;
        # a team missing from "before" would count as unchanged
        rank_after = after[team_id]
        rank_before = before.get(team_id, rank_after)
        entries.append(MoverEntry(
            team_id=team_id,
            team_name=stats.team_name,
            rank_before=rank_before,
            rank_after=rank_after,
            delta=rank_before - rank_after,
        ))

    biggest = None
    worst = None
    for entry in entries:
        if biggest is None or entry.delta > biggest.delta:
            biggest = entry
        if worst is None or entry.delta < worst.delta:
            worst = entry

    return Movers(
        race_no=race_no,
        previous_race_no=previous,
        biggest_mover=biggest,
        hard_luck=worst,
        entries=entries,
    )
