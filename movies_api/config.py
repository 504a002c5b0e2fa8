from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MOVIES_FILE = Path(__file__).resolve().parent / "data" / "movies.json"


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 1234

    ACCEPTED_ORIGINS: List[str] = ["http://localhost:8080", "*"]
    ALLOWED_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE"]

    MOVIES_FILE: Path = DEFAULT_MOVIES_FILE
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
