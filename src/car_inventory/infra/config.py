from __future__ import annotations

import logging
import os
from dataclasses import dataclass


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Runtime settings, read from ``CAR_INVENTORY_*`` environment variables.

    - seed_catalog: start the store with the five demo cars
    - log_level: root log level name
    - host / port: where the uvicorn runner binds
    """

    seed_catalog: bool = True
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    seed_catalog = _env_bool(os.getenv("CAR_INVENTORY_SEED"), default=True)

    log_level = os.getenv("CAR_INVENTORY_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(f"CAR_INVENTORY_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")

    host = os.getenv("CAR_INVENTORY_HOST", "127.0.0.1").strip()

    raw_port = os.getenv("CAR_INVENTORY_PORT", "8000").strip()
    try:
        port = int(raw_port)
    except ValueError:
        raise RuntimeError(f"CAR_INVENTORY_PORT must be an integer, got {raw_port!r}")

    return Settings(seed_catalog=seed_catalog, log_level=log_level, host=host, port=port)


def configure_logging(level: str) -> None:
    """Send log records to stderr with a single handler on the root logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
