"""Settings for a HelperBuddy session, loaded from environment variables.

One Settings object is built at startup and passed explicitly to the session
(no module-level paths). CLI options override environment values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

ENV_PREFIX = "BUDDY"

BACKENDS = ("text", "sql")
DEFAULT_DATA_FILE = Path("~/Documents/TaskInfo.txt").expanduser()
DEFAULT_EXIT_GRACE_SECONDS = 3.0
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    data_file: Path
    backend: str

    # ---- Session ----
    exit_grace_seconds: float

    # ---- Logging ----
    log_level: str
    log_file: Path | None


def load_settings(**overrides: object) -> Settings:
    """
    Read settings from BUDDY_* environment variables, then apply overrides.

    Overrides with value None are ignored, so CLI options can be passed through
    unconditionally.
    """
    settings = Settings(
        data_file=_env_path(_k("DATA_FILE"), DEFAULT_DATA_FILE),
        backend=_env(_k("BACKEND"), "text").lower(),
        exit_grace_seconds=_env_float(_k("EXIT_GRACE_SECONDS"), DEFAULT_EXIT_GRACE_SECONDS),
        log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper(),
        log_file=_env_path(_k("LOG_FILE"), None),
    )
    changes = {k: v for k, v in overrides.items() if v is not None}
    if changes:
        settings = replace(settings, **changes)
    if settings.backend not in BACKENDS:
        raise ValueError(f"Unknown storage backend '{settings.backend}', expected one of {BACKENDS}")
    return settings
