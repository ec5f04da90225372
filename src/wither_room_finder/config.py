"""Runtime configuration for the wither room finder."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="WITHER_ROOM_FINDER_", env_file=".env", extra="ignore")

    app_name: str = "wither-room-finder"
    log_level: str = "WARNING"
    max_chunk_radius: int = Field(
        default=64,
        ge=1,
        description="Largest chunk radius a single search may simulate.",
    )


settings = Settings()
