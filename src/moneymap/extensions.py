"""Database wiring for the Flask application."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import create_db_engine, create_session_factory, init_database


def init_db(app: Flask) -> None:
    """Create the SQLModel engine and schema and keep them on the app."""

    config: BaseConfig = app.config["MONEYMAP_CONFIG"]
    engine = create_db_engine(config)
    init_database(engine)

    state = app.extensions.setdefault("moneymap", {})
    state["engine"] = engine
    state["session_factory"] = create_session_factory(engine)


def get_engine(app: Flask | None = None):
    """Return the initialized SQLModel engine."""

    state = (app or current_app).extensions.get("moneymap", {})
    if "engine" not in state:
        raise RuntimeError("Database engine not initialized")
    return state["engine"]


def get_session_factory(app: Flask | None = None):
    """Return the transactional session factory bound to the app's engine."""

    state = (app or current_app).extensions.get("moneymap", {})
    if "session_factory" not in state:
        raise RuntimeError("Database engine not initialized")
    return state["session_factory"]
