from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from core.models import RatingMode

DEFAULT_API_BASE_URL = "http://localhost:8000"
INVALID_INPUT_POLICIES = ("ignore", "report")
FAILED_ENTRY_POLICIES = ("discard", "retain")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = 12.0
    rating_mode: RatingMode = RatingMode.PERCENTAGE
    ordinal_min: int = 1
    invalid_input: str = "ignore"
    failed_entries: str = "discard"
    use_bulk_endpoint: bool = False
    page_size: int = 5
    log_level: str = "INFO"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = (os.getenv(name) or default).strip().lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value


def load_settings() -> Settings:
    mode = _env_choice("HIRING_RATING_MODE", RatingMode.PERCENTAGE.value, tuple(m.value for m in RatingMode))
    ordinal_min = _env_number("HIRING_ORDINAL_MIN", 1, int)
    if ordinal_min not in (0, 1):
        raise ValueError(f"HIRING_ORDINAL_MIN must be 0 or 1, got {ordinal_min}")
    page_size = _env_number("HIRING_PAGE_SIZE", 5, int)
    if page_size < 1:
        raise ValueError(f"HIRING_PAGE_SIZE must be positive, got {page_size}")
    timeout = _env_number("HIRING_API_TIMEOUT", 12.0, float)
    if timeout <= 0:
        raise ValueError(f"HIRING_API_TIMEOUT must be positive, got {timeout}")

    return Settings(
        api_base_url=(os.getenv("HIRING_API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/"),
        api_timeout=timeout,
        rating_mode=RatingMode(mode),
        ordinal_min=ordinal_min,
        invalid_input=_env_choice("HIRING_INVALID_INPUT", "ignore", INVALID_INPUT_POLICIES),
        failed_entries=_env_choice("HIRING_FAILED_ENTRIES", "discard", FAILED_ENTRY_POLICIES),
        use_bulk_endpoint=_env_bool("HIRING_BULK_ENDPOINT", False),
        page_size=page_size,
        log_level=(os.getenv("HIRING_LOG_LEVEL") or "INFO").strip().upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
