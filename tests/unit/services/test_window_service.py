"""
Unit tests for window (half) lookup
"""

from app.models.window import UNKNOWN_WINDOW, Window
from app.services.window_service import window_for_race


class TestWindowForRace:

    def test_inclusive_bounds(self, windows):
        assert window_for_race(1, windows) == "1H"
        assert window_for_race(2, windows) == "1H"
        assert window_for_race(3, windows) == "2H"
        assert window_for_race(4, windows) == "2H"

    def test_outside_every_window(self, windows):
        assert window_for_race(0, windows) == UNKNOWN_WINDOW
        assert window_for_race(5, windows) == UNKNOWN_WINDOW

    def test_no_windows(self):
        assert window_for_race(1, []) == UNKNOWN_WINDOW

    def test_overlap_first_match_wins(self):
        overlapping = [
            Window(label="A", min_race=1, max_race=10),
            Window(label="B", min_race=5, max_race=15),
        ]

        assert window_for_race(7, overlapping) == "A"
        assert window_for_race(12, overlapping) == "B"
