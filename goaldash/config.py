"""Application configuration."""

import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Momentum backend
    momentum_api_url: str = os.getenv("MOMENTUM_API_URL", "http://localhost:3000")
    momentum_request_timeout: float = float(
        os.getenv("MOMENTUM_REQUEST_TIMEOUT", "10")
    )  # seconds, per goal fetch

    # Server
    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "8000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = False


settings = Settings()
