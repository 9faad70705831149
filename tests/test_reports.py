"""Spending chart rendering."""

from __future__ import annotations

import matplotlib.pyplot as plt

from moneymap.services.reports import build_spending_chart, export_spending_png


def test_chart_lists_expense_categories(sample_transactions):
    fig = build_spending_chart(transactions=sample_transactions)
    try:
        ax = fig.axes[0]
        legend = ax.get_legend()
        labels = [text.get_text() for text in legend.get_texts()]
        assert len(labels) == 3
        assert labels[0].startswith("Food & Dining: $130.25")
        assert all("Transfer" not in label for label in labels)
    finally:
        plt.close(fig)


def test_empty_chart():
    fig = build_spending_chart(transactions=[])
    try:
        texts = [text.get_text() for text in fig.axes[0].texts]
        assert "No expense data" in texts
    finally:
        plt.close(fig)


def test_export_png(tmp_path, sample_transactions):
    output = tmp_path / "charts" / "spending.png"

    path = export_spending_png(transactions=sample_transactions, output_path=output)

    assert path == output
    assert output.exists()
    assert output.stat().st_size > 0
