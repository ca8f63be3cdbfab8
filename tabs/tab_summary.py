"""Tab 2: Summary — lease totals, usage mix and export."""

import streamlit as st

from data.session_store import get_sections
from engine.section_summary import (
    summarize_section, section_to_dataframe, summaries_to_dataframe, export_sections_xlsx,
)
from components.metrics_cards import render_summary_metrics
from components.charts import usage_donut
from components.tables import render_lease_table, render_styled_table
from config.defaults import CATEGORY_LABELS, STATUS_LABELS


def render(sidebar_state):
    """Render the Summary tab."""
    st.header("Summary")

    sections = get_sections()
    if not sections:
        st.info("No sections for this property type.")
        return

    summaries = []
    for category, section in sections.items():
        summary = summarize_section(section)
        summaries.append(summary)

        status_label = STATUS_LABELS[category].get(section.status, section.status)
        st.subheader(f"{CATEGORY_LABELS[category]} — {status_label}")
        render_summary_metrics(summary)

        col_table, col_chart = st.columns([3, 2])
        with col_table:
            render_lease_table(section_to_dataframe(section))
        with col_chart:
            st.plotly_chart(usage_donut(summary), use_container_width=True, key=f"donut_{category}")

    if len(summaries) > 1:
        st.divider()
        render_styled_table(summaries_to_dataframe(summaries), title="All Sections")

    st.download_button(
        "Download lease tables (.xlsx)",
        data=export_sections_xlsx(sections),
        file_name=f"occupancy_{sidebar_state.property_type.lower().replace(' ', '_')}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
