"""Global sidebar controls for property type selection."""

import streamlit as st
from dataclasses import dataclass
from typing import List
from data.session_store import get_property_type, set_property_type, get_sections, reset_sections
from config.defaults import PROPERTY_TYPES, CATEGORY_LABELS, STATUS_LABELS


@dataclass
class SidebarState:
    property_type: str
    categories: List[str]


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Occupancy Planner")
        st.divider()

        property_types = list(PROPERTY_TYPES.keys())
        current = get_property_type()
        selected_idx = property_types.index(current) if current in property_types else 0
        selected = st.selectbox(
            "Property Type",
            options=property_types,
            index=selected_idx,
            key="sidebar_property_type",
        )

        if selected != current:
            set_property_type(selected)

        st.divider()

        if st.button("Reset sections", key="sidebar_reset"):
            reset_sections()

        # Current status of each section
        for category, section in get_sections().items():
            label = STATUS_LABELS[category].get(section.status, section.status)
            st.caption(f"{CATEGORY_LABELS[category]}: {label} ({len(section.active_info.lease_rows)} rows)")

    return SidebarState(
        property_type=selected,
        categories=list(PROPERTY_TYPES[selected]),
    )
