"""Environment-driven configuration for totp_guard."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

DEFAULT_WINDOW = 1

# Process environment wins over values found in a local .env file.
load_dotenv(override=False)


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, default)
    if isinstance(value, str):
        value = value.strip() or None
    return value


def _get_int_env(name: str, default: int, *, minimum: int | None = None) -> int:
    raw_value = _get_env(name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError:
        value = None
    if value is None or (minimum is not None and value < minimum):
        LOGGER.warning("invalid_int_env", extra={"env_name": name, "value": raw_value})
        return default
    return value


class Settings:
    """Centralized access to environment-driven configuration values."""

    def __init__(self) -> None:
        self.DEFAULT_WINDOW: int = _get_int_env(
            "TOTP_DEFAULT_WINDOW", DEFAULT_WINDOW, minimum=0
        )
        self.ISSUER: str | None = _get_env("TOTP_ISSUER")
        self.LOG_LEVEL: str = (_get_env("TOTP_LOG_LEVEL") or "INFO").upper()


settings = Settings()
