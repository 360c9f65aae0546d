from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class PassgenSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PASSGEN_",
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )

    # no cap unless explicitly configured
    max_attempts: int | None = Field(default=None)
    dictionary_path: Path | None = Field(default=None)

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("max_attempts", "dictionary_path", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("max_attempts")
    @classmethod
    def _positive_attempts(cls, v):
        if v is not None and v <= 0:
            raise ValueError("max_attempts must be positive")
        return v


@lru_cache()
def get_settings() -> PassgenSettings:
    return PassgenSettings()
