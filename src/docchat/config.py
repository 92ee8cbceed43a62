"""Runtime settings, read from DOCCHAT_* environment variables or a .env file."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DOCCHAT_",
        env_file=".env",
        extra="ignore",
    )

    # Chunking
    chunk_size: int = Field(default=500, ge=1)
    chunk_overlap: int = Field(default=50, ge=0)

    # Retrieval
    top_k: int = Field(default=3, ge=0)
    relevance_threshold: float = 0.1

    # Scoring
    phrase_boost: float = Field(default=0.3, ge=0.0)
    min_token_length: int = Field(default=3, ge=1)

    # Simulated answer latency in seconds
    compose_delay_min: float = Field(default=0.0, ge=0.0)
    compose_delay_max: float = Field(default=0.0, ge=0.0)

    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_delay_range(self) -> "Settings":
        if self.compose_delay_max < self.compose_delay_min:
            raise ValueError("compose_delay_max must be >= compose_delay_min")
        return self

    @property
    def compose_delay_range(self) -> tuple[float, float]:
        return (self.compose_delay_min, self.compose_delay_max)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
