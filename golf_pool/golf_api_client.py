from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import Settings

logger = logging.getLogger(__name__)


class ProviderUnavailable(RuntimeError):
    pass


class GolfApiClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._settings = settings
        host = settings.golf_api_host.strip().rstrip("/")
        self._host = host
        self._client = httpx.AsyncClient(
            base_url=f"https://{host}",
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "GolfApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_leaderboard(self, tournament_id: str) -> Any:
        api_key = self._settings.golf_api_key.strip()
        if not api_key:
            raise ProviderUnavailable(
                "GOLF_API_KEY is not configured. Set GOLF_API_KEY=... in the environment or .env"
            )

        path = f"/leaderboard/{str(tournament_id).strip()}"
        headers = {
            "x-rapidapi-host": self._host,
            "x-rapidapi-key": api_key,
        }
        try:
            response = await self._client.get(path, headers=headers)
        except httpx.TransportError as exc:
            raise ProviderUnavailable(f"Leaderboard request failed for {path}: {exc}") from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ProviderUnavailable(
                f"Leaderboard request failed ({exc.response.status_code}) for {path}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderUnavailable(f"Leaderboard returned non-JSON payload for {path}") from exc

        if isinstance(payload, dict) and payload.get("error"):
            raise ProviderUnavailable(f"Leaderboard API error for {path}: {payload['error']}")
        logger.debug("Fetched leaderboard payload for tournament %s", tournament_id)
        return payload
