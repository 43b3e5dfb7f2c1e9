"""
Pytest fixtures and configuration for all tests.

Sample season used across the suite (halves 1H = races 1-2, 2H = races 3-4):

    race 1: T1 -> #10 (P1, 5 pts)   T2 -> #10 (P1, 5 pts)   T3 -> #20 (P4, 3 pts)
    race 2: T1 -> #10 (dup)          T2 -> #20 (P2, 4 pts)   T3 -> no car
    race 3: T1 -> #10 (P1, 6 pts)   T2 -> #30 (P5, 2 pts)   T3 -> no row
"""

import pytest

from app.models.window import Window
from app.services.model_builder import build_model


@pytest.fixture
def windows():
    """Two halves of two races each."""
    return [
        Window(label="1H", min_race=1, max_race=2),
        Window(label="2H", min_race=3, max_race=4),
    ]


@pytest.fixture
def teams_rows():
    """Rows of the teams sheet."""
    return [
        {"team_id": "T1", "team_name": "Alpha", "contact": "alpha@example.com", "paid": "TRUE"},
        {"team_id": "T2", "team_name": "Beta", "contact": "", "paid": "no"},
        {"team_id": "T3", "team_name": "Gamma", "paid": "true"},
    ]


@pytest.fixture
def picks_rows():
    """Rows of the picks sheet."""
    return [
        {"race_no": "1", "half": "", "team_id": "T1", "car_no": "10"},
        {"race_no": "1", "half": "", "team_id": "T2", "car_no": "10"},
        {"race_no": "1", "half": "", "team_id": "T3", "car_no": "20"},
        {"race_no": "2", "half": "", "team_id": "T1", "car_no": "10"},
        {"race_no": "2", "half": "", "team_id": "T2", "car_no": "20"},
        {"race_no": "2", "half": "", "team_id": "T3", "car_no": ""},
        {"race_no": "3", "half": "", "team_id": "T1", "car_no": "10"},
        {"race_no": "3", "half": "", "team_id": "T2", "car_no": "30"},
    ]


@pytest.fixture
def race_points_rows():
    """Rows of the race_points sheet."""
    return [
        {"race_no": "1", "car_no": "10", "points": "5", "finish_pos": "1", "win": "", "top5": ""},
        {"race_no": "1", "car_no": "20", "points": "3", "finish_pos": "4", "win": "", "top5": ""},
        {"race_no": "1", "car_no": "30", "points": "1", "finish_pos": "9", "win": "", "top5": ""},
        {"race_no": "2", "car_no": "10", "points": "2", "finish_pos": "8", "win": "", "top5": ""},
        {"race_no": "2", "car_no": "20", "points": "4", "finish_pos": "2", "win": "", "top5": ""},
        {"race_no": "3", "car_no": "10", "points": "6", "finish_pos": "1", "win": "", "top5": ""},
        {"race_no": "3", "car_no": "30", "points": "2", "finish_pos": "5", "win": "", "top5": ""},
    ]


@pytest.fixture
def sample_model(teams_rows, picks_rows, race_points_rows, windows):
    """Standings model built from the sample season (default duplicate policy)."""
    return build_model(teams_rows, picks_rows, race_points_rows, windows)


def rows_to_csv(rows):
    """Render dict rows as CSV text (header taken from the first row)."""
    headers = list(rows[0].keys())
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(row.get(h, "") for h in headers))
    return "\n".join(lines) + "\n"


@pytest.fixture
def sheets_csv(teams_rows, picks_rows, race_points_rows):
    """CSV text of the three sheets, keyed by their published URL."""
    return {
        "https://sheets.test/teams.csv": rows_to_csv(teams_rows),
        "https://sheets.test/picks.csv": rows_to_csv(picks_rows),
        "https://sheets.test/race_points.csv": rows_to_csv(race_points_rows),
    }
