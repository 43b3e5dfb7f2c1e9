"""
Normalization - Turns raw sheet rows into typed participants, results and picks.

Every parser here is total: malformed or missing values degrade to a default
instead of raising, so one bad cell in a sheet never breaks the standings.
"""

import math
from typing import Any, Iterable, Mapping, Optional

from app.models.participant import Participant
from app.models.pick import Pick
from app.models.result import Number, ResultEntry
from app.models.window import Window
from app.services.window_service import window_for_race


Row = Mapping[str, Any]

TRUTHY_LITERAL = "TRUE"


def _field(row: Row, name: str) -> str:
    value = row.get(name)
    return "" if value is None else str(value).strip()


def parse_number(value: Any, default: Optional[Number] = 0) -> Optional[Number]:
    """
    Parse a numeric cell.

    Returns an int when the value is integral, a float otherwise and
    `default` for blank, non-numeric or non-finite input.
    """
    text = "" if value is None else str(value).strip()
    if not text:
        return default

    try:
        number = float(text)
    except ValueError:
        return default

    if not math.isfinite(number):
        return default

    return int(number) if number.is_integer() else number


def parse_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """Like parse_number, but non-integral numbers also fall back to default."""
    number = parse_number(value, None)
    if number is None or isinstance(number, float):
        return default
    return number


def parse_flag(value: Any) -> bool:
    """Case-insensitive comparison against "TRUE"."""
    text = "" if value is None else str(value).strip()
    return text.upper() == TRUTHY_LITERAL


def normalize_participants(rows: Iterable[Row]) -> list[Participant]:
    """Build Participant values. A repeated team_id keeps its first row."""
    participants = {}
    for row in rows:
        team_id = _field(row, "team_id")
        if team_id in participants:
            continue
        participants[team_id] = Participant(
            team_id=team_id,
            team_name=_field(row, "team_name"),
            contact=_field(row, "contact"),
            paid=parse_flag(row.get("paid")),
        )
    return list(participants.values())


def normalize_results(rows: Iterable[Row]) -> list[ResultEntry]:
    """
    Build ResultEntry values.

    win/top5 are set when flagged in the sheet OR implied by the finish
    position (1 for a win, 5 or better for a top five).
    """
    results = []
    for row in rows:
        finish_pos = parse_int(row.get("finish_pos"), None)
        results.append(ResultEntry(
            race_no=parse_int(row.get("race_no")),
            car_no=parse_int(row.get("car_no")),
            points=parse_number(row.get("points"), 0),
            finish_pos=finish_pos,
            win=parse_flag(row.get("win")) or finish_pos == 1,
            top5=parse_flag(row.get("top5")) or (finish_pos is not None and finish_pos <= 5),
        ))
    return results


def index_results(results: Iterable[ResultEntry]) -> dict[tuple[int, int], ResultEntry]:
    """Index by (race_no, car_no). A repeated key keeps the last row."""
    return {result.key: result for result in results}


def normalize_picks(
    rows: Iterable[Row],
    participants: Iterable[Participant],
    windows: list[Window],
) -> list[Pick]:
    """
    Build Pick values.

    The half comes from the row when present, otherwise from the race number.
    Unknown team ids keep the raw id as their display name.
    """
    names = {p.team_id: p.team_name for p in participants}

    picks = []
    for row in rows:
        race_no = parse_int(row.get("race_no"))
        team_id = _field(row, "team_id")
        half = _field(row, "half") or window_for_race(race_no, windows)
        car_text = _field(row, "car_no")

        picks.append(Pick(
            race_no=race_no,
            half=half,
            team_id=team_id,
            team_name=names.get(team_id, team_id),
            car_no=parse_int(car_text, None) if car_text else None,
        ))
    return picks
