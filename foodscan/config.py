"""Configuration for the scanner core.

Values come from environment variables, optionally seeded from a .env
file. Example .env:
    FOODSCAN_OFF_BASE_URL=https://world.openfoodfacts.org/api/v0
    FOODSCAN_SCAN_TIMEOUT_MS=3000
    LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import pydantic
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from foodscan.domain.shared.errors import ValidationError

DEFAULT_OFF_BASE_URL = "https://world.openfoodfacts.org/api/v0"
DEFAULT_USER_AGENT = "FoodScan/1.0 (python)"


class ScannerSettings(BaseModel):
    """
    Scanner settings.

    Example:
        >>> settings = ScannerSettings()
        >>> assert settings.scan_timeout_s == 3.0
    """

    model_config = ConfigDict(frozen=True)

    off_base_url: str = Field(DEFAULT_OFF_BASE_URL, min_length=1, description="OFF API root")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="HTTP User-Agent")
    http_timeout_s: float = Field(10.0, gt=0, description="HTTP request timeout")
    http_max_retries: int = Field(1, ge=1, le=5, description="Attempts per lookup")
    scan_timeout_ms: int = Field(3000, gt=0, description="Time an arming waits for a code")
    log_level: str = Field("INFO", description="Log level name")

    @property
    def scan_timeout_s(self) -> float:
        return self.scan_timeout_ms / 1000


def load_settings(env_file: Optional[str | Path] = None) -> ScannerSettings:
    """
    Build settings from environment variables.

    Args:
        env_file: Optional .env file; values already present in the
            environment win

    Returns:
        ScannerSettings

    Raises:
        ValidationError: If a variable has an invalid value
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    raw = {
        "off_base_url": os.getenv("FOODSCAN_OFF_BASE_URL", DEFAULT_OFF_BASE_URL),
        "user_agent": os.getenv("FOODSCAN_USER_AGENT", DEFAULT_USER_AGENT),
        "http_timeout_s": os.getenv("FOODSCAN_HTTP_TIMEOUT_S", "10"),
        "http_max_retries": os.getenv("FOODSCAN_HTTP_MAX_RETRIES", "1"),
        "scan_timeout_ms": os.getenv("FOODSCAN_SCAN_TIMEOUT_MS", "3000"),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
    try:
        return ScannerSettings.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid scanner settings: {e}") from e
