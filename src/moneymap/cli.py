"""Flask CLI commands for MoneyMap."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import click
from flask import Flask, current_app
from sqlmodel import select

PAGES = ("dashboard", "accounts", "debts", "savings", "bills", "budget", "transactions")


def _config():
    return current_app.config["MONEYMAP_CONFIG"]


def _resolve_user_id(session_factory, username: str) -> int:
    from .models import User

    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user is None:
            raise click.ClickException(
                f"Unknown user {username!r}; run `flask moneymap-seed` first."
            )
        return user.id


def init_app(app: Flask) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("moneymap-seed")
    @click.option("--today", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
                  help="Anchor demo dates on this day instead of today.")
    def moneymap_seed(today) -> None:
        """Seed the demo user with sample accounts, debts, bills and goals."""

        from .extensions import get_session_factory
        from .services.demo_seed import run_demo_seed

        anchor = today.date() if today else date.today()
        summary = run_demo_seed(
            get_session_factory(), username=_config().DEMO_USERNAME, today=anchor
        )
        if summary.created:
            click.echo(
                f"Seeded demo user {summary.user_id}: {summary.accounts} accounts, "
                f"{summary.debts} debts, {summary.bills} bills, {summary.goals} goals, "
                f"{summary.transactions} transactions."
            )
        else:
            click.echo("Demo data already present; nothing to do.")

    @app.cli.command("moneymap-summary")
    @click.argument("page", type=click.Choice(PAGES))
    @click.option("--as-of", "as_of", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
                  help="Evaluate as of this day (defaults to today).")
    @click.option("--user", "username", default=None, help="Username (defaults to the demo user).")
    def moneymap_summary(page: str, as_of, username: str | None) -> None:
        """Print a page summary as JSON."""

        from .extensions import get_session_factory
        from .services.summaries import FinanceSummaryService, to_payload

        session_factory = get_session_factory()
        user_id = _resolve_user_id(session_factory, username or _config().DEMO_USERNAME)
        service = FinanceSummaryService.from_session_factory(session_factory, _config())
        day = as_of.date() if as_of else date.today()

        if page == "dashboard":
            summary = service.dashboard(user_id, as_of=day)
        elif page == "accounts":
            summary = service.accounts_overview(user_id)
        elif page == "debts":
            summary = service.debts_overview(user_id, as_of=day)
        elif page == "savings":
            summary = service.savings_overview(user_id, as_of=day)
        elif page == "bills":
            summary = service.bills_overview(user_id, as_of=day)
        elif page == "budget":
            summary = service.budget_overview(user_id, as_of=day)
            if summary is None:
                raise click.ClickException("No budget configured for this user.")
        else:
            summary = service.transactions_overview(user_id)

        click.echo(json.dumps(to_payload(summary), indent=2))

    @app.cli.command("moneymap-report")
    @click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
    @click.option("--user", "username", default=None, help="Username (defaults to the demo user).")
    def moneymap_report(output: Path, username: str | None) -> None:
        """Write a spending-by-category chart to OUTPUT (PNG)."""

        from .extensions import get_session_factory
        from .infra.repositories import SQLModelTransactionRepository
        from .services.reports import export_spending_png

        session_factory = get_session_factory()
        user_id = _resolve_user_id(session_factory, username or _config().DEMO_USERNAME)
        transactions = SQLModelTransactionRepository(session_factory).list_for_user(user_id)
        path = export_spending_png(transactions=transactions, output_path=output)
        click.echo(f"Report written: {path}")
