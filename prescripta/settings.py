"""
prescripta.settings
===================

Configuration settings for the Prescripta application.

This module provides centralized configuration options that can be used across
the application. It includes default values that can be overridden
via environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------------
# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

# Database settings
# ---------------------------------------------------------------------------
DB_FILE = os.environ.get("PRESCRIPTA_DB_FILE", BASE_DIR / "prescripta.db")
DB_URL = f"sqlite:///{DB_FILE}"
DB_ECHO = os.environ.get("PRESCRIPTA_DB_ECHO", "False").lower() == "true"

# API settings
# ---------------------------------------------------------------------------
API_HOST = os.environ.get("PRESCRIPTA_API_HOST", "127.0.0.1")
API_PORT = int(os.environ.get("PRESCRIPTA_API_PORT", "8000"))
API_DEBUG = os.environ.get("PRESCRIPTA_API_DEBUG", "False").lower() == "true"

# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("PRESCRIPTA_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Pydantic settings model for case defaults
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Pydantic model for domain defaults, loaded from environment variables."""

    default_penalty_years: int = Field(2, ge=2, le=12, description="Maximum penalty used for a fresh case")
    warning_days: int = Field(180, ge=0, description="Quick calculator warns when fewer days remain")
    timeline_density: float = Field(10.0, gt=0, description="Axis units per day at scale 1")

    model_config = SettingsConfigDict(
        env_prefix="PRESCRIPTA_",
        env_file=".env",  # load from .env file if present
        case_sensitive=False,
        extra="ignore",
    )


# Initialize settings
settings = Settings()
