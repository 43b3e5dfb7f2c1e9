"""
🏁 StandingsStore - Carga de las hojas y modelo de standings en memoria

Cada app tiene su propio store (app.state.store); no hay estado global.
El modelo se reconstruye entero en cada carga.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from app.core.config import Settings
from app.models.standings import StandingsModel
from app.repositories.sheet_repository import SheetRepository
from app.services.model_builder import ModelBuilder


logger = logging.getLogger(__name__)


class StandingsLoadError(Exception):
    """Raised when any of the three sheets cannot be fetched or parsed."""

    def __init__(self, failures: dict[str, str]):
        self.failures = failures
        details = "; ".join(f"{name}: {reason}" for name, reason in failures.items())
        super().__init__(f"Failed to load sheets ({details})")


class StandingsNotLoadedError(Exception):
    """Raised when the standings are requested before a successful load."""
    pass


class StandingsStore:
    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.transport = transport  # para tests (httpx.MockTransport)

        self.model: Optional[StandingsModel] = None
        self.loaded_at: Optional[datetime] = None
        self.last_error: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self.model is not None

    def get_model(self) -> StandingsModel:
        if self.model is None:
            raise StandingsNotLoadedError(self.last_error or "Standings not loaded yet")
        return self.model

    def set_model(self, model: StandingsModel) -> None:
        self.model = model
        self.loaded_at = datetime.now(timezone.utc)
        self.last_error = None

    async def fetch_sheets(self) -> dict[str, list[dict[str, str]]]:
        """
        Descarga las tres hojas en paralelo.

        Si falla cualquiera se lanza un único StandingsLoadError con todas las
        fallas; nunca se devuelve un resultado parcial ni se reintenta.
        """
        urls = self.settings.csv_urls()
        missing = {name: "CSV URL not configured" for name, url in urls.items() if not url}
        if missing:
            raise StandingsLoadError(missing)

        async with httpx.AsyncClient(
            timeout=self.settings.fetch_timeout_seconds,
            transport=self.transport,
        ) as client:
            repo = SheetRepository(client)
            results = await asyncio.gather(
                *(repo.fetch_rows(url) for url in urls.values()),
                return_exceptions=True,
            )

        failures = {}
        sheets = {}
        for name, result in zip(urls, results):
            if isinstance(result, Exception):
                failures[name] = str(result) or type(result).__name__
            elif isinstance(result, BaseException):
                raise result
            else:
                sheets[name] = result

        if failures:
            raise StandingsLoadError(failures)

        return sheets

    async def load(self) -> StandingsModel:
        """
        Carga las hojas y reconstruye el modelo.

        Si la carga falla se conserva el último modelo bueno y se guarda el
        error para /health.
        """
        logger.info("🔄 Loading standings sheets...")

        try:
            sheets = await self.fetch_sheets()
        except StandingsLoadError as e:
            self.last_error = str(e)
            logger.error(f"❌ {e}")
            raise

        builder = ModelBuilder(
            self.settings.windows(),
            auto_zero_duplicates=self.settings.auto_zero_duplicates,
        )
        model = builder.build(sheets["teams"], sheets["picks"], sheets["race_points"])
        self.set_model(model)

        logger.info(
            f"✅ Standings loaded: {len(model.ranked)} teams, "
            f"{len(sheets['picks'])} picks, {len(model.races)} races"
        )
        return model
