"""Spending chart rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from ..domain.records import TransactionRecord, TransactionType  # noqa: E402
from .money import format_currency  # noqa: E402
from .transactions import totals_by_category  # noqa: E402

MAX_LEGEND_ITEMS = 12


def build_spending_chart(*, transactions: Iterable[TransactionRecord]) -> Figure:
    """Donut chart of expenses by category with the total in the middle."""

    totals = totals_by_category(transactions, type=TransactionType.EXPENSE)
    labels = list(totals)
    sizes = [float(amount) for amount in totals.values()]
    grand_total = sum(totals.values())

    fig, ax = plt.subplots(figsize=(10, 7))

    if sizes:
        cmap = plt.get_cmap("tab20c")
        colors = [cmap(i / max(len(sizes), 1)) for i in range(len(sizes))]
        wedges, _texts, autotexts = ax.pie(
            sizes,
            labels=None,
            autopct=lambda pct: f"{pct:.1f}%" if pct > 4 else "",
            wedgeprops=dict(width=0.45, edgecolor="white", linewidth=1.5),
            startangle=90,
            colors=colors,
            pctdistance=0.78,
        )
        for autotext in autotexts:
            autotext.set_fontsize(9)
            autotext.set_fontweight("bold")
            autotext.set_color("white")

        ax.text(0, 0.08, "Total Spending", ha="center", va="center", fontsize=11, color="#666")
        ax.text(0, -0.08, format_currency(grand_total), ha="center", va="center",
                fontsize=18, fontweight="bold", color="#1F2937")

        shown = min(len(labels), MAX_LEGEND_ITEMS)
        legend_labels = [
            f"{labels[i]}: {format_currency(totals[labels[i]])} ({sizes[i] / float(grand_total) * 100:.1f}%)"
            for i in range(shown)
        ]
        ax.legend(
            wedges[:shown],
            legend_labels,
            title="Categories",
            loc="center left",
            bbox_to_anchor=(1.02, 0.5),
            fontsize=9,
        )
        ax.axis("equal")
        ax.set_title("Spending by Category", fontsize=16, fontweight="bold", pad=20)
    else:
        ax.text(0.5, 0.5, "No expense data", ha="center", va="center", fontsize=14, color="#666")
        ax.axis("off")

    fig.tight_layout()
    return fig


def export_spending_png(*, transactions: Iterable[TransactionRecord], output_path: Path) -> Path:
    """Render the spending chart to PNG and return the path."""

    fig = build_spending_chart(transactions=transactions)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(output_path, bbox_inches="tight", dpi=120)
    finally:
        plt.close(fig)
    return output_path


__all__ = ["build_spending_chart", "export_spending_png"]
