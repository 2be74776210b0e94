# src/task_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole app.
- Nothing is required at import time; every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_KEEPER"

load_dotenv(override=False)


class StoreBackend(StrEnum):
    SQLITE = "sqlite"
    FILE = "file"
    MEMORY = "memory"

    @classmethod
    def parse(cls, raw: str | None) -> StoreBackend:
        if not raw:
            return cls.SQLITE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.SQLITE


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


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

    # ---- Storage ----
    data_dir: Path
    store_backend: StoreBackend
    store_path: Path
    storage_key: str

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "task_keeper").strip() or "task_keeper"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_keeper"))
        store_backend = StoreBackend.parse(os.getenv(_k("STORE_BACKEND")))

        if store_backend is StoreBackend.FILE:
            default_store_path = data_dir / "kv"
        else:
            default_store_path = data_dir / "tasks.sqlite3"
        store_path = _env_path(_k("STORE_PATH"), default_store_path)

        storage_key = _env(_k("STORAGE_KEY"), "FavoriteTasks").strip() or "FavoriteTasks"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_backend=store_backend,
            store_path=store_path,
            storage_key=storage_key,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
