"""Centralised application settings loaded from environment / .env file."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    # HTTP server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("port", mode="before")
    @classmethod
    def _empty_port_means_default(cls, value):
        # PORT= (set but blank) falls back like an unset variable
        if isinstance(value, str) and not value.strip():
            return DEFAULT_PORT
        return value


settings = Settings()
