# api/matches.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, JSONResponse

from utils.challonge import ChallongeClient, ConfigurationError, UpstreamError, get_challonge_client
from utils.render import flatten_match, participant_names, render_matches
from .tournaments import upstream_error_response

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_FAILED = "Failed to fetch matches"


@router.get(
    "/{tournament_id}/matches",
    summary="List all matches for a tournament",
    response_class=HTMLResponse,
)
async def list_tournament_matches(
    tournament_id: str,
    client: ChallongeClient = Depends(get_challonge_client),
):
    try:
        # Sequential; the first failure aborts the remaining calls
        tournament = await client.get_tournament(tournament_id)
        match_records = await client.list_matches(tournament_id)
        participants = await client.list_participants(tournament_id)

        names = participant_names(participants)
        matches = [flatten_match(m, names) for m in match_records]

        return HTMLResponse(render_matches(tournament.get("name"), matches))

    except ConfigurationError as exc:
        logger.error("Error fetching matches for %s: %s", tournament_id, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})
    except UpstreamError as exc:
        logger.error("Error fetching matches for %s: %s", tournament_id, exc)
        return upstream_error_response(exc, FETCH_FAILED)
    except Exception:
        logger.exception("Error fetching matches for %s", tournament_id)
        return JSONResponse(status_code=500, content={"error": FETCH_FAILED})
