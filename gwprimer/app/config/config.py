# File: gwprimer/app/config/config.py
# Version: v0.3.0
"""
Process settings using Pydantic Settings.

Controls:
- App metadata
- NCBI Entrez contact e-mail and fetch limit
- Default parameters JSON and log level

Environment variables use the GWPRIMER_ prefix (e.g. GWPRIMER_ENTREZ_EMAIL).
"""
from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

_THIS_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    APP_NAME: str = "gwprimer"
    APP_VERSION: str = "0.3.0"

    # --- NCBI ---
    ENTREZ_EMAIL: str = "anonymous@example.org"
    ENTREZ_RETMAX: int = 20

    # --- Design defaults ---
    PARAMS_DEFAULT_PATH: Path = _THIS_DIR / "primers_param_default.json"

    LOG_LEVEL: str = "WARNING"

    # - extra="ignore": unrelated GWPRIMER_* vars won't crash
    model_config = SettingsConfigDict(
        env_prefix="GWPRIMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
