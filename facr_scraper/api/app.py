"""
FastAPI application - FACR club data API
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from facr_scraper.services.club_service import ClubService
from facr_scraper.storage.logo_cache import LogoCache

from .routes import router

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Builds the club service on startup unless one was injected."""
    owns_service = getattr(app.state, "club_service", None) is None
    if owns_service:
        # One logo cache for the life of the process
        app.state.club_service = ClubService.create(cache=LogoCache())
    logger.info("FACR Scraper API started")

    yield

    if owns_service:
        await app.state.club_service.close()
    logger.info("FACR Scraper API stopped")


def create_app(service: Optional[ClubService] = None) -> FastAPI:
    app = FastAPI(
        title="FACR Scraper API",
        description="Clubs, competitions, matches and standings from fotbal.cz as JSON",
        version=API_VERSION,
        lifespan=lifespan,
    )
    if service is not None:
        app.state.club_service = service
    app.include_router(router)
    return app
