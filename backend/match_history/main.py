"""Main FastAPI application for the match history service."""

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from match_history import __version__
from match_history.core import (
    get_global_settings,
    get_logger,
    register_exception_handlers,
    setup_logging,
)
from match_history.features.matches import router as matches_router
from match_history.middleware import RequestLoggingMiddleware

settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = get_logger(__name__)


def _validate_api_key_configuration() -> None:
    """Log Riot API key configuration status."""
    if not settings.api_key_configured:
        logger.warning(
            "RIOT_API_KEY not configured! Match history requests will fail.",
            hint="Get your key from https://developer.riotgames.com",
        )
    elif settings.riot_api_key and settings.riot_api_key.startswith("RGAPI-"):
        logger.info("Riot API key configured (development key detected)")
        logger.warning("Development API keys expire every 24 hours!")
    else:
        logger.info("Riot API key configured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up match history service",
        platform=settings.riot_platform,
        region=settings.riot_region,
    )
    _validate_api_key_configuration()
    yield
    logger.info("Shutting down match history service")


tags_metadata = [
    {
        "name": "matches",
        "description": "Recent match history for a summoner.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

app = FastAPI(
    title="Match History Service",
    description="""
    Recent League of Legends match summaries for a summoner name.

    `GET /api/match-history?summonerName=<name>` resolves the summoner,
    fetches the five most recent matches in parallel and returns outcome,
    champion and K/D/A for each.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

register_exception_handlers(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(matches_router, prefix="/api")
app.include_router(matches_router, prefix="/api/v1")


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Reports whether the service is up and whether a Riot API key is
    configured. Does not call the Riot API.
    """
    return {
        "status": "healthy",
        "message": "Application is running",
        "version": __version__,
        "api_key_configured": settings.api_key_configured,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "match_history.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
