from .sheet_repository import SheetRepository, SheetParseError, parse_csv

__all__ = [
    "SheetRepository",
    "SheetParseError",
    "parse_csv",
]
