"""
Hello World stub
"""
import logging

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from config import Settings, get_settings

app = FastAPI(title="Hello World")


@app.get("/", response_class=PlainTextResponse)
async def hello(settings: Settings = Depends(get_settings)):
    return "Hello World!" + settings.test1


if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logging.getLogger(__name__).info("Example app listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
