"""
Challonge Tournament Viewer
Version: 1.0.0
"""
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from api.api import router as challonge_router
from config import get_settings

app = FastAPI(title="Challonge Tournament Viewer")
app.include_router(challonge_router)


async def redirect_to_tournaments(request: Request):
    return RedirectResponse(url="/tournaments", status_code=302)


# Plain Starlette route: no method list, so every method matches.
# Registered last so the routes above take precedence.
app.add_route("/{path:path}", redirect_to_tournaments, include_in_schema=False)


if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Tournament viewer listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
