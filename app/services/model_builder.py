"""
ModelBuilder - Builds the standings model from the three sheets.

Pure function of its inputs: no I/O, no logging, no shared state. The whole
model is rebuilt on every load.
"""

from collections import defaultdict
from typing import Any, Iterable, Mapping, Optional

from app.models.participant import Participant
from app.models.pick import Pick
from app.models.result import Number, ResultEntry
from app.models.standings import (
    DUP_FLAG,
    MISS_FLAG,
    ParticipantAggregate,
    ScoringCell,
    StandingsModel,
)
from app.models.window import Window
from app.services.normalization import (
    index_results,
    normalize_participants,
    normalize_picks,
    normalize_results,
)
from app.services.window_service import window_for_race


def ranking_key(total_points: Number, wins: int, top5s: int, team_id: str) -> tuple:
    """
    Sort key for the leaderboard.

    Orden:
    1. total_points (descendente)
    2. wins picked (descendente)
    3. top-5s picked (descendente)
    4. team_id (ascendente) - desempate final para que el orden sea estable
    """
    return (-total_points, -wins, -top5s, team_id)


def rank_participants(
    aggregates: Iterable[ParticipantAggregate]
) -> list[ParticipantAggregate]:
    """
    Sort aggregates and assign rank / behind in place.

    Ties on every key still get consecutive ranks; there is no shared rank.
    """
    ranked = sorted(
        aggregates,
        key=lambda s: ranking_key(s.total_points, s.wins_picked, s.top5s_picked, s.team_id)
    )

    leader_points = ranked[0].total_points if ranked else 0
    for rank, stats in enumerate(ranked, start=1):
        stats.rank = rank
        stats.behind = leader_points - stats.total_points

    return ranked


class ModelBuilder:
    """
    Scores every (team, race) pair and folds the cells into standings.

    Reglas:
    - Sin coche elegido: flag "miss", 0 puntos
    - Coche repetido dentro de la misma mitad: flag "dup" desde la segunda vez
      (0 puntos si auto_zero_duplicates, si no conserva los puntos reales)
    - Coche sin resultado para la carrera: pick válido con 0 puntos
    """

    def __init__(self, windows: list[Window], auto_zero_duplicates: bool = True):
        self.windows = list(windows)
        self.auto_zero_duplicates = auto_zero_duplicates

    def build(
        self,
        teams_rows: Iterable[Mapping[str, Any]],
        picks_rows: Iterable[Mapping[str, Any]],
        race_points_rows: Iterable[Mapping[str, Any]],
    ) -> StandingsModel:
        teams = normalize_participants(teams_rows)
        results = normalize_results(race_points_rows)
        picks = normalize_picks(picks_rows, teams, self.windows)

        races = sorted({r.race_no for r in results} | {p.race_no for p in picks})
        results_by_key = index_results(results)

        # Un pick por equipo y carrera; si se repite gana la última fila
        picks_by_key = {(p.team_id, p.race_no): p for p in picks}

        cells = self.build_grid(teams, races, picks_by_key, results_by_key)
        stats = self.aggregate(teams, cells)
        ranked = rank_participants(stats.values())

        return StandingsModel(
            races=races,
            last_race=races[-1] if races else None,
            cells=cells,
            ranked=ranked,
            stats=stats,
        )

    def build_grid(
        self,
        teams: list[Participant],
        races: list[int],
        picks_by_key: Mapping[tuple[str, int], Pick],
        results_by_key: Mapping[tuple[int, int], ResultEntry],
    ) -> list[ScoringCell]:
        """
        One cell per team per race.

        Races are walked in ascending order so the used-car sets grow in pick
        order; that is what makes the second use of a car the duplicate.
        """
        # team_id -> half -> cars already used
        used_by_half: dict[str, dict[str, set[int]]] = {
            t.team_id: defaultdict(set) for t in teams
        }

        cells = []
        for race_no in races:
            for team in teams:
                pick = picks_by_key.get((team.team_id, race_no))
                cells.append(self.score_cell(
                    team,
                    race_no,
                    pick,
                    used_by_half[team.team_id],
                    results_by_key,
                ))
        return cells

    def score_cell(
        self,
        team: Participant,
        race_no: int,
        pick: Optional[Pick],
        used_by_half: dict[str, set[int]],
        results_by_key: Mapping[tuple[int, int], ResultEntry],
    ) -> ScoringCell:
        half = pick.half if pick else window_for_race(race_no, self.windows)
        car_no = pick.car_no if pick else None

        cell = ScoringCell(
            race_no=race_no,
            half=half,
            team_id=team.team_id,
            team_name=team.team_name,
            car_no=car_no,
        )

        if car_no is None:
            cell.flags = [MISS_FLAG]
            return cell

        used = used_by_half[half]
        result = results_by_key.get((race_no, car_no))

        if car_no in used:
            cell.flags = [DUP_FLAG]
            if self.auto_zero_duplicates:
                return cell
        else:
            used.add(car_no)

        if result:
            cell.points = result.points
            cell.win = result.win
            cell.top5 = result.top5
            cell.finish_pos = result.finish_pos

        return cell

    def aggregate(
        self,
        teams: list[Participant],
        cells: list[ScoringCell],
    ) -> dict[str, ParticipantAggregate]:
        """Single pass over the cells; totals are never stored anywhere else."""
        stats = {
            t.team_id: ParticipantAggregate(
                team_id=t.team_id,
                team_name=t.team_name,
                contact=t.contact,
                paid=t.paid,
            )
            for t in teams
        }

        for cell in cells:
            s = stats[cell.team_id]
            s.total_points += cell.points
            if cell.win:
                s.wins_picked += 1
            if cell.top5:
                s.top5s_picked += 1
            if cell.is_dup:
                s.flags_dup += 1
            if cell.is_miss:
                s.flags_miss += 1
            s.points_by_race[cell.race_no] = cell.points

        return stats


def build_model(
    teams_rows: Iterable[Mapping[str, Any]],
    picks_rows: Iterable[Mapping[str, Any]],
    race_points_rows: Iterable[Mapping[str, Any]],
    windows: list[Window],
    auto_zero_duplicates: bool = True,
) -> StandingsModel:
    """Shortcut for ModelBuilder(...).build(...)"""
    builder = ModelBuilder(windows, auto_zero_duplicates)
    return builder.build(teams_rows, picks_rows, race_points_rows)
