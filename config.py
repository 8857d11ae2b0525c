# config.py
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Challonge API
    challonge_api_key: Optional[str] = None
    challonge_base_url: str = "https://api.challonge.com/v1"

    # Hello stub
    test1: str = "test321"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
