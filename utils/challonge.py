# utils/challonge.py
import logging
from typing import Any, Dict, List, Optional

import httpx
from fastapi import Depends

from config import Settings, get_settings

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "ChallongeViewer/1.0"}

MISSING_CREDENTIALS = "Missing Challonge API credentials in environment variables"


class ConfigurationError(Exception):
    """Raised when the Challonge API key is not configured."""


class UpstreamError(Exception):
    """
    Raised when a Challonge call fails.

    status_code is the upstream HTTP status when a response came back,
    or None when no response was received at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


def _error_payload(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text or None


def _unwrap(items: Any, key: str) -> List[Dict[str, Any]]:
    """[{"match": {...}}, ...] -> [{...}, ...]"""
    return [item[key] for item in items or []]


class ChallongeClient:
    """Read-only client for the Challonge v1 API."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.challonge.com/v1",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    async def _get(self, path: str) -> Any:
        if not self.api_key:
            raise ConfigurationError(MISSING_CREDENTIALS)

        url = f"{self.base_url}{path}.json"
        logger.debug("GET %s", url)

        try:
            async with httpx.AsyncClient(
                headers=HEADERS, transport=self.transport, follow_redirects=True
            ) as client:
                resp = await client.get(url, params={"api_key": self.api_key})
        except httpx.RequestError as exc:
            raise UpstreamError(f"Challonge request failed: {exc}") from exc

        if resp.is_error:
            raise UpstreamError(
                f"Challonge error (status {resp.status_code}) for {path}",
                status_code=resp.status_code,
                payload=_error_payload(resp),
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError("Challonge returned invalid JSON") from exc

    async def list_tournaments(self) -> List[Dict[str, Any]]:
        data = await self._get("/tournaments")
        return _unwrap(data, "tournament")

    async def get_tournament(self, tournament_id: str) -> Dict[str, Any]:
        data = await self._get(f"/tournaments/{tournament_id}")
        return data["tournament"]

    async def list_matches(self, tournament_id: str) -> List[Dict[str, Any]]:
        data = await self._get(f"/tournaments/{tournament_id}/matches")
        return _unwrap(data, "match")

    async def list_participants(self, tournament_id: str) -> List[Dict[str, Any]]:
        data = await self._get(f"/tournaments/{tournament_id}/participants")
        return _unwrap(data, "participant")


def get_challonge_client(settings: Settings = Depends(get_settings)) -> ChallongeClient:
    return ChallongeClient(settings.challonge_api_key, base_url=settings.challonge_base_url)
