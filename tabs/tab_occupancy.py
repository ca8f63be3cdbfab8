"""Tab 1: Occupancy — status, counts and lease rows per section."""

import streamlit as st

from data.session_store import get_sections
from components.lease_table import render_section_editor


def render(sidebar_state):
    """Render the Occupancy tab."""
    st.header("Occupancy")
    st.caption(f"Property type: {sidebar_state.property_type}")

    sections = get_sections()
    if not sections:
        st.info("No sections for this property type.")
        return

    for i, category in enumerate(sidebar_state.categories):
        section = sections.get(category)
        if section is None:
            continue
        if i > 0:
            st.divider()
        render_section_editor(section)
