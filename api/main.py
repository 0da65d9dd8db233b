"""FastAPI application for the golf handicap tracker."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database.repositories import RoundRepository
from database.store import FileStore
from services import RoundEntryService
from utils.config import Settings
from utils.logger import setup_logger

logger = logging.getLogger(__name__)


def build_service(settings: Settings) -> RoundEntryService:
    """Wire the file-backed store, repository and service from settings."""
    store = FileStore(settings.store_dir, quota_bytes=settings.quota_bytes)
    repo = RoundRepository(store, key=settings.storage_key)
    return RoundEntryService(repo)


def create_app(
    service: Optional[RoundEntryService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logger(settings.log_level, settings.log_file)
        logger.info("Serving rounds from %s", settings.store_dir.resolve())
        yield

    app = FastAPI(
        title="Golf Handicap API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.round_service = service or build_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import rounds, stats
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    def health():
        return {"status": "ok", "rounds": len(app.state.round_service.rounds())}

    return app


app = create_app()
