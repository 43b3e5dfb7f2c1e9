"""
📄 SheetRepository - Lectura de hojas CSV publicadas en la web

Cada hoja (teams, picks, race_points) se publica desde Google Sheets como CSV.
Este repository descarga el texto y lo convierte en filas de campos con nombre.
"""

import csv
from io import StringIO

import httpx


class SheetParseError(Exception):
    """Raised when a sheet cannot be decoded into rows."""
    pass


def parse_csv(text: str) -> list[dict[str, str]]:
    """
    Convierte el texto CSV en una lista de dicts {header: valor}

    - Los headers y los valores se recortan (strip)
    - Las filas completamente vacías se descartan
    - Las celdas que faltan al final de una fila quedan como ""
    """
    try:
        rows = list(csv.reader(StringIO(text)))
    except csv.Error as e:
        raise SheetParseError(f"Invalid CSV: {e}") from e

    if not rows:
        raise SheetParseError("Sheet is empty (no header row)")

    headers = [(h or "").strip() for h in rows[0]]

    records = []
    for row in rows[1:]:
        if not any((cell or "").strip() for cell in row):
            continue
        records.append({
            header: (row[idx] if idx < len(row) else "").strip()
            for idx, header in enumerate(headers)
        })
    return records


class SheetRepository:
    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def fetch_text(self, url: str) -> str:
        """Descarga el CSV sin caché; cualquier status != 2xx es un error"""
        response = await self.client.get(url, headers={"Cache-Control": "no-cache"})
        response.raise_for_status()
        return response.text

    async def fetch_rows(self, url: str) -> list[dict[str, str]]:
        text = await self.fetch_text(url)
        return parse_csv(text)
