# src/echon/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "ECHON"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Console ----
    prompt: str
    show_timestamps: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    log_file: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Echon").strip() or "Echon"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        prompt = _env(_k("PROMPT"), ">>> You: ")
        show_timestamps = _env_bool(_k("SHOW_TIMESTAMPS"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/echon"))
        log_file = _env_path(_k("LOG_FILE"), data_dir / "echon.log")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            prompt=prompt,
            show_timestamps=show_timestamps,
            data_dir=data_dir,
            log_file=log_file,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
