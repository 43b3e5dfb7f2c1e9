"""
TeamService - Per-team history and chart series.
"""

from pydantic import BaseModel

from app.models.result import Number
from app.models.standings import ParticipantAggregate, ScoringCell, StandingsModel


TOP_CHART_SIZE = 5


class TeamServiceError(Exception):
    """Base exception for team service errors."""
    pass


class TeamNotFoundError(TeamServiceError):
    """Raised when the team id is not in the teams sheet."""
    pass


class TeamOption(BaseModel):
    """Entrada del selector de equipos ("1. Alpha")"""
    team_id: str
    label: str


class ChartSeries(BaseModel):
    label: str
    data: list[Number]


class RunningTotalsChart(BaseModel):
    labels: list[str]
    datasets: list[ChartSeries]


class TeamDetail(BaseModel):
    team: ParticipantAggregate
    link: str
    history: list[ScoringCell]
    chart: RunningTotalsChart


def race_labels(races: list[int]) -> list[str]:
    return [f"R{r}" for r in races]


class TeamService:
    def __init__(self, model: StandingsModel):
        self.model = model

    def get_options(self) -> list[TeamOption]:
        return [
            TeamOption(team_id=t.team_id, label=f"{t.rank}. {t.team_name}")
            for t in self.model.ranked
        ]

    def get_team(self, team_id: str) -> ParticipantAggregate:
        team = self.model.stats.get(team_id)
        if team is None:
            raise TeamNotFoundError(f"Team {team_id} not found")
        return team

    def get_detail(self, team_id: str) -> TeamDetail:
        team = self.get_team(team_id)
        races = self.model.races

        return TeamDetail(
            team=team,
            link=f"#team={team_id}",
            history=self.model.cells_for_team(team_id),
            chart=RunningTotalsChart(
                labels=race_labels(races),
                datasets=[ChartSeries(label=team.team_name, data=team.running_totals(races))],
            ),
        )

    def get_top_chart(self, limit: int = TOP_CHART_SIZE) -> RunningTotalsChart:
        """Running totals for the leaders (top 5 by default)."""
        races = self.model.races
        return RunningTotalsChart(
            labels=race_labels(races),
            datasets=[
                ChartSeries(label=t.team_name, data=t.running_totals(races))
                for t in self.model.ranked[:limit]
            ],
        )
