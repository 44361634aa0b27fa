"""
Project-wide configuration using Pydantic Settings.
Upstream API, logging and HTTP server settings live here.
"""
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    base_url: str = "http://ergast.com"
    timeout: float = 30.0  # seconds, per request
    pool_maxsize: int = 10

    model_config = {"env_prefix": "ERGAST_"}


class LogConfig(BaseSettings):
    level: str = "INFO"
    dir: Path | None = None

    model_config = {"env_prefix": "PICKEM_LOG_"}


class ServerConfig(BaseSettings):
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    model_config = {"env_prefix": "PICKEM_"}


class Config:
    """Unified project configuration."""

    api: APIConfig = APIConfig()
    log: LogConfig = LogConfig()
    server: ServerConfig = ServerConfig()


# Singleton instance
cfg = Config()
