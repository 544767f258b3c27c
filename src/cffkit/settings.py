"""Configuration helpers for cffkit."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime configuration loaded from env vars with sensible defaults."""

    log_level: str = "INFO"
    default_format: str = "apalike"
    csl_style: str = "harvard-cite-them-right"
    csl_locale: str = "en-US"
    schema_dir: Path | None = None

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        schema_dir = os.environ.get("CFFKIT_SCHEMA_DIR")
        return cls(
            log_level=os.environ.get("CFFKIT_LOG_LEVEL", "INFO"),
            default_format=os.environ.get("CFFKIT_DEFAULT_FORMAT", "apalike"),
            csl_style=os.environ.get("CFFKIT_CSL_STYLE", "harvard-cite-them-right"),
            csl_locale=os.environ.get("CFFKIT_CSL_LOCALE", "en-US"),
            schema_dir=Path(schema_dir) if schema_dir else None,
        )


def get_settings() -> Settings:
    """Convenience accessor for lazy modules."""
    return Settings.load()
