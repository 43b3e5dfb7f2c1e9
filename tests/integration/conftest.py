"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import HalfRange, get_settings
from app.main import app
from app.standings_store import StandingsStore


@pytest.fixture
def test_settings():
    """Settings with the two-race halves used by the sample season."""
    settings = get_settings().model_copy(update={
        "halves": {
            "1H": HalfRange(min_race=1, max_race=2),
            "2H": HalfRange(min_race=3, max_race=4),
        },
        "venmo_url": "https://venmo.test/pool",
        "cash_app_url": "",
    })
    app.dependency_overrides[get_settings] = lambda: settings
    yield settings
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
async def client(test_settings, sample_model):
    """
    HTTP client for testing API endpoints.

    The app gets a store already holding the sample model, so no sheet is
    fetched (the lifespan does not run under ASGITransport).
    """
    store = StandingsStore(test_settings)
    store.set_model(sample_model)

    original_store = getattr(app.state, "store", None)
    app.state.store = store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.state.store = original_store


@pytest.fixture
async def empty_client(test_settings):
    """HTTP client whose store never loaded successfully."""
    store = StandingsStore(test_settings)
    store.last_error = "Failed to load sheets (teams: CSV URL not configured)"

    original_store = getattr(app.state, "store", None)
    app.state.store = store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.state.store = original_store
