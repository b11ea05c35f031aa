from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.sessions import MAX_SESSIONS
from domain.meal_db import MEAL_DB_URL, TIMEOUT


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEAL_BROWSER_")

    env: Env = Env.local
    html_dir: Path = Path(__file__).resolve().parent.parent / "assets" / "html"
    meal_db_url: str = MEAL_DB_URL
    request_timeout: float = TIMEOUT
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    max_sessions: int = MAX_SESSIONS
