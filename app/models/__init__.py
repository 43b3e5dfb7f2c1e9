from .participant import Participant
from .window import Window, UNKNOWN_WINDOW
from .result import ResultEntry
from .pick import Pick
from .standings import (
    CellFlag,
    ScoringCell,
    ParticipantAggregate,
    StandingsModel,
)

__all__ = [
    "Participant",
    "Window",
    "UNKNOWN_WINDOW",
    "ResultEntry",
    "Pick",
    "CellFlag",
    "ScoringCell",
    "ParticipantAggregate",
    "StandingsModel",
]
