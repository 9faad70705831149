"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "MoneyMap"
    DB_FILENAME = "moneymap.db"
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}
    DEBUG = False
    TESTING = False

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.SECRET_KEY = os.getenv("MONEYMAP_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir(data_dir)
        self.DEV_MODE = _env_bool("MONEYMAP_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("MONEYMAP_DATABASE_URL", self._build_sqlite_url())
        self.DEMO_USERNAME = os.getenv("MONEYMAP_DEMO_USERNAME", "demo")
        # Remaining-per-period below this triggers the "low remaining" advice.
        self.LOW_REMAINING_THRESHOLD = Decimal(os.getenv("MONEYMAP_LOW_REMAINING_THRESHOLD", "200"))
        self.RECENT_TRANSACTION_LIMIT = _env_int("MONEYMAP_RECENT_TRANSACTION_LIMIT", 5)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("MONEYMAP_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self, data_dir: Path | str | None) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = data_dir or os.getenv("MONEYMAP_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    TESTING = True

    def __init__(self, data_dir: Path | str | None = None) -> None:
        super().__init__(data_dir)
        # Never inherit a DATABASE_URL from the developer's environment.
        self.DATABASE_URL = self._build_sqlite_url()
