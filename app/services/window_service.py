"""
Window lookup - Maps a race number to its half of the season.
"""

from typing import Iterable

from app.models.window import Window, UNKNOWN_WINDOW


def window_for_race(race_no: int, windows: Iterable[Window]) -> str:
    """
    Return the label of the first window containing race_no.

    Windows are checked in configuration order, so if two ranges overlap the
    earlier one wins. Races outside every window map to UNKNOWN_WINDOW.
    """
    for window in windows:
        if window.contains(race_no):
            return window.label
    return UNKNOWN_WINDOW
