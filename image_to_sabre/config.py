"""
Runtime configuration for the image-to-Sabre service.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

OPENAI_MODEL = "gpt-4.1-mini"
MAX_IMAGE_DATA_URL_CHARS = 4_000_000  # hosting platform payload limit


@dataclass(frozen=True)
class Settings:
    """Read-only settings shared by the app factory, CLI and service."""

    openai_api_key: str
    model: str = OPENAI_MODEL
    temperature: float = 0
    max_image_chars: int = MAX_IMAGE_DATA_URL_CHARS
    cors_enabled: bool = True
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build settings from the environment (and a local .env, if present)."""
    load_dotenv()

    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise RuntimeError("Missing OPENAI_API_KEY (set it in the environment or .env).")

    return Settings(
        openai_api_key=api_key,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
