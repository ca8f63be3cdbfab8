"""Reusable KPI metric card widgets."""

import streamlit as st

from engine.section_summary import SectionSummary


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_summary_metrics(summary: SectionSummary):
    render_metric_row([
        {"label": "Units", "value": summary.total_rows},
        {"label": "Rented", "value": summary.rented_rows},
        {"label": "Vacant", "value": summary.vacant_rows,
         "delta": f"{summary.vacancy_rate:.0%} vacancy" if summary.vacant_rows else None,
         "delta_color": "inverse"},
        {"label": "Total Deposit", "value": f"{summary.total_deposit:,}"},
        {"label": "Monthly Rent", "value": f"{summary.total_monthly_rent:,}"},
    ])
