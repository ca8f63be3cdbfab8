"""Editable occupancy status, counts and lease rows for one section."""

import streamlit as st

from engine.occupancy_section import OccupancySection
from config.defaults import (
    CATEGORY_LABELS, STATUS_LABELS, STATUS_RESIDENCE, STATUS_SELF_USE,
    USAGE_OPTIONS, USAGE_RENTED, BUSINESS_REGISTRATION_OPTIONS,
)


def _sync(key: str, value):
    """Push the model value into widget state before the widget is drawn."""
    st.session_state[key] = value


# --- Callbacks ---

def _on_status_change(section: OccupancySection, key: str):
    section.change_status(st.session_state[key])


def _on_total_count_change(section: OccupancySection, key: str):
    # on_change fires when the input loses focus or Enter is pressed
    section.change_total_count(st.session_state[key])
    section.commit_total_count()


def _on_tenant_count_change(section: OccupancySection, key: str):
    section.change_tenant_count(st.session_state[key])
    section.commit_tenant_count()


def _on_usage_change(section: OccupancySection, row_id: str, key: str):
    section.change_row_usage(row_id, st.session_state[key])


def _on_deposit_change(section: OccupancySection, row_id: str, key: str):
    section.change_row_deposit(row_id, st.session_state[key])


def _on_rent_change(section: OccupancySection, row_id: str, key: str):
    section.change_row_rent(row_id, st.session_state[key])


def _on_registration_change(section: OccupancySection, row_id: str, key: str):
    section.change_row_business_registration(row_id, st.session_state[key])


# --- Rendering ---

def render_status_selector(section: OccupancySection):
    labels = STATUS_LABELS[section.category]
    key = f"{section.category}_status"
    _sync(key, section.status)
    st.radio(
        "Occupancy Status",
        options=section.statuses,
        format_func=lambda s: labels.get(s, s),
        horizontal=True,
        key=key,
        on_change=_on_status_change,
        args=(section, key),
    )


def render_count_inputs(section: OccupancySection):
    info = section.active_info
    prefix = f"{section.category}_{section.status}"
    owner_only = section.status in (STATUS_RESIDENCE, STATUS_SELF_USE)

    col1, col2 = st.columns(2)
    with col1:
        key = f"{prefix}_total"
        _sync(key, info.total_count)
        st.text_input(
            "Total Units" if owner_only else "Total Units (incl. vacant)",
            key=key,
            on_change=_on_total_count_change,
            args=(section, key),
        )
    with col2:
        key = f"{prefix}_tenants"
        _sync(key, info.tenant_count)
        st.text_input(
            "Tenants",
            key=key,
            disabled=owner_only,
            on_change=_on_tenant_count_change,
            args=(section, key),
        )


def render_lease_rows(section: OccupancySection):
    prefix = f"{section.category}_{section.status}"
    usage_options = USAGE_OPTIONS[section.category]
    commercial = section.is_commercial

    header = st.columns([1, 3, 3, 3, 3] if commercial else [1, 3, 3, 3])
    header[0].markdown("**No.**")
    header[1].markdown("**Usage**")
    header[2].markdown("**Deposit**")
    header[3].markdown("**Monthly Rent**")
    if commercial:
        header[4].markdown("**Business Registration**")

    for row in section.active_info.lease_rows:
        cols = st.columns([1, 3, 3, 3, 3] if commercial else [1, 3, 3, 3])
        row_key = f"{prefix}_row{row.id}"
        cols[0].write(row.id)

        options = usage_options if row.usage in usage_options else usage_options + [row.usage]
        key = f"{row_key}_usage"
        _sync(key, row.usage)
        cols[1].selectbox(
            "Usage", options, key=key, label_visibility="collapsed",
            on_change=_on_usage_change, args=(section, row.id, key),
        )

        rented = row.usage == USAGE_RENTED
        key = f"{row_key}_deposit"
        _sync(key, row.deposit)
        cols[2].text_input(
            "Deposit", key=key, label_visibility="collapsed", disabled=not rented,
            on_change=_on_deposit_change, args=(section, row.id, key),
        )

        key = f"{row_key}_rent"
        _sync(key, row.rent)
        cols[3].text_input(
            "Monthly Rent", key=key, label_visibility="collapsed", disabled=not rented,
            on_change=_on_rent_change, args=(section, row.id, key),
        )

        if commercial and row.has_business_registration:
            registration = row.business_registration
            options = BUSINESS_REGISTRATION_OPTIONS
            if registration not in options:
                options = options + [registration]
            key = f"{row_key}_registration"
            _sync(key, registration)
            cols[4].selectbox(
                "Business Registration", options, key=key, label_visibility="collapsed",
                format_func=lambda v: v or "—",
                on_change=_on_registration_change, args=(section, row.id, key),
            )


def render_section_editor(section: OccupancySection):
    """Render the full editor for one section."""
    st.subheader(CATEGORY_LABELS.get(section.category, section.category))
    render_status_selector(section)
    render_count_inputs(section)
    render_lease_rows(section)
