"""Flask application factory.

The app hosts configuration, logging, the database engine and the CLI
commands; it registers no HTTP routes.
"""

from __future__ import annotations

from flask import Flask

from . import cli
from .config import BaseConfig, DevConfig
from .extensions import init_db
from .logging_config import setup_logging


def create_app(config: BaseConfig | None = None) -> Flask:
    cfg = config or DevConfig()

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=cfg.SECRET_KEY,
        DEBUG=cfg.DEBUG,
        TESTING=cfg.TESTING,
        MONEYMAP_CONFIG=cfg,
    )

    setup_logging(cfg)
    init_db(app)
    cli.init_app(app)

    app.logger.info("MoneyMap app created", extra={"database_url": cfg.DATABASE_URL})
    return app
