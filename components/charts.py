"""Plotly chart builders for the Occupancy Planner."""

import plotly.graph_objects as go

from engine.section_summary import SectionSummary
from engine.row_derivation import owner_usage_label
from config.defaults import CATEGORY_COMMERCIAL, USAGE_RENTED, USAGE_VACANT

USAGE_COLORS = {
    "Owner": "#4A90D9",
    USAGE_RENTED: "#E8734A",
    USAGE_VACANT: "#B0B0B0",
}


def usage_donut(summary: SectionSummary, title: str = "Usage Mix") -> go.Figure:
    """Donut chart of rows by usage."""
    owner_label = owner_usage_label(summary.category == CATEGORY_COMMERCIAL)
    labels = [owner_label, USAGE_RENTED, USAGE_VACANT]
    values = [summary.owner_rows, summary.rented_rows, summary.vacant_rows]
    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.6,
        marker_colors=[USAGE_COLORS["Owner"], USAGE_COLORS[USAGE_RENTED], USAGE_COLORS[USAGE_VACANT]],
        textinfo="percent+label",
        sort=False,
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{summary.total_rows} units", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
