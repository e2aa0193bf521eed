from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
import uvicorn

from .config import Settings, get_settings
from .golf_api_client import GolfApiClient
from .models import (
    ErrorResponse,
    LeaderboardResponse,
    RefreshResponse,
    TournamentInfoResponse,
)
from .provider import LeaderboardProvider
from .repository import PoolRepository, RefreshFailed
from .seed import DEFAULT_POOL, SAMPLE_SCORES, load_pool

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def build_repository(settings: Settings, client: GolfApiClient) -> PoolRepository:
    if settings.pool_file:
        pool = load_pool(settings.pool_file)
        sample_scores = None
    else:
        pool = DEFAULT_POOL
        sample_scores = SAMPLE_SCORES if settings.seed_sample_scores else None
    return PoolRepository.from_pool(
        LeaderboardProvider(client),
        pool,
        tournament_id=settings.golf_tournament_id,
        sample_scores=sample_scores,
    )


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(message=message).model_dump())


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[PoolRepository] = None,
) -> FastAPI:
    settings = settings or get_settings()
    client: Optional[GolfApiClient] = None
    if repository is None:
        client = GolfApiClient(settings)
        repository = build_repository(settings, client)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if client is not None:
                await client.aclose()

    app = FastAPI(
        title="Golf Pool Leaderboard",
        version="0.1.0",
        description="Fantasy golf pool standings backed by a live tournament leaderboard.",
        lifespan=lifespan,
    )
    app.state.repository = repository

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/api/leaderboard",
        response_model=LeaderboardResponse,
        responses=_ERROR_RESPONSES,
    )
    async def leaderboard():
        try:
            return repository.get_leaderboard()
        except Exception:
            logger.exception("Error fetching leaderboard")
            return _error("Failed to fetch leaderboard data")

    @app.post(
        "/api/refresh-scores",
        response_model=RefreshResponse,
        responses=_ERROR_RESPONSES,
    )
    async def refresh_scores():
        try:
            outcome = await repository.refresh()
        except RefreshFailed as exc:
            return _error(str(exc))
        except Exception:
            logger.exception("Error refreshing scores")
            return _error("Failed to refresh scores")
        return RefreshResponse(
            participants=outcome.leaderboard.participants,
            tournament_info=outcome.leaderboard.tournament_info,
            unmatched=outcome.unmatched,
        )

    @app.get(
        "/api/tournament-info",
        response_model=TournamentInfoResponse,
        responses=_ERROR_RESPONSES,
    )
    async def tournament_info():
        try:
            return TournamentInfoResponse(tournament_info=repository.get_tournament_info())
        except Exception:
            logger.exception("Error fetching tournament info")
            return _error("Failed to fetch tournament info")

    return app


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    uvicorn.run(create_app(settings), host=host, port=port, reload=False)


if __name__ == "__main__":
    run()
