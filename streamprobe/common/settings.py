# streamprobe/common/settings.py
from __future__ import annotations

from functools import lru_cache
import shlex
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from streamprobe.common.strings.splitters import csv_to_list


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class FFProbeConfig(BaseModel):
    bin: str = Field(default="ffprobe", alias="FFPROBE_BIN")
    timeout_sec: int = Field(60, gt=0, description="Upper bound for a single ffprobe run")
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    # extra ffprobe options, e.g. "-probesize 50M -analyzeduration 100M"
    extra_args: List[str] = Field(default_factory=list)

    @field_validator("extra_args", mode="before")
    @classmethod
    def _split_args(cls, v):
        if isinstance(v, str):
            return shlex.split(v)
        return v

    model_config = {"populate_by_name": True}


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "streamprobe"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Paths --------
    # Root the HTTP API is allowed to probe under.
    media_root: Path = Path("/media")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from streamprobe.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
