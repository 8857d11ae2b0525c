# api/tournaments.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, JSONResponse

from utils.challonge import ChallongeClient, ConfigurationError, UpstreamError, get_challonge_client
from utils.render import flatten_tournament, render_tournaments

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_FAILED = "Failed to fetch tournaments"


def upstream_error_response(exc: UpstreamError, fallback: str) -> JSONResponse:
    """Forward the upstream status and payload, or 500 when nothing came back."""
    if exc.status_code is None:
        return JSONResponse(status_code=500, content={"error": fallback})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.payload or fallback})


@router.get("", summary="List all tournaments", response_class=HTMLResponse)
async def list_tournaments(client: ChallongeClient = Depends(get_challonge_client)):
    try:
        records = await client.list_tournaments()
        tournaments = [flatten_tournament(r) for r in records]
        return HTMLResponse(render_tournaments(tournaments))

    except ConfigurationError as exc:
        logger.error("Error fetching tournaments: %s", exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})
    except UpstreamError as exc:
        logger.error("Error fetching tournaments: %s", exc)
        return upstream_error_response(exc, FETCH_FAILED)
    except Exception:
        logger.exception("Error fetching tournaments")
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED})
