"""
Entry point de la API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.standings_store import StandingsStore, StandingsLoadError

from app.controllers.health_controller import router as health_router
from app.controllers.info_controller import router as info_router
from app.controllers.standings_controller import router as standings_router
from app.controllers.weekly_controller import router as weekly_router
from app.controllers.teams_controller import router as teams_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Cada app tiene su propio store; se carga una vez al arrancar
    app.state.store = StandingsStore(settings)
    try:
        await app.state.store.load()
    except StandingsLoadError:
        # La API levanta igual: /health muestra el error y el resto responde 503
        logger.warning("⚠️ Starting without standings, use POST /standings/reload")
    yield


# Creo la app
app = FastAPI(
    title="Race Pool Standings API",
    description="Standings, weekly breakdowns and team history for a season-long pick pool",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(info_router)
app.include_router(standings_router)
app.include_router(weekly_router)
app.include_router(teams_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Race Pool Standings API",
        "version": "1.0.0",
        "docs": "/docs"  # Link a la documentación interactiva de Swagger
    }
