"""Typed wrapper around st.session_state for occupancy sections."""

import logging

import streamlit as st
from typing import Dict, Optional
from engine.occupancy_section import OccupancySection
from config.defaults import PROPERTY_TYPES, DEFAULT_PROPERTY_TYPE, DEFAULT_INITIAL_STATUS

logger = logging.getLogger(__name__)


def build_sections(property_type: str) -> Dict[str, OccupancySection]:
    """Create one independent section container per category of the property type."""
    categories = PROPERTY_TYPES.get(property_type, PROPERTY_TYPES[DEFAULT_PROPERTY_TYPE])
    return {
        category: OccupancySection(category, DEFAULT_INITIAL_STATUS[category])
        for category in categories
    }


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "property_type": DEFAULT_PROPERTY_TYPE,
        "sections": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default
    if st.session_state["sections"] is None:
        st.session_state["sections"] = build_sections(st.session_state["property_type"])


# --- Getters ---

def get_property_type() -> str:
    return st.session_state.get("property_type", DEFAULT_PROPERTY_TYPE)


def get_sections() -> Dict[str, OccupancySection]:
    return st.session_state.get("sections") or {}


def get_section(category: str) -> Optional[OccupancySection]:
    return get_sections().get(category)


# --- Setters ---

def set_property_type(property_type: str):
    """Switch the property type; sections are rebuilt only when it actually changes."""
    if property_type == get_property_type() and st.session_state.get("sections"):
        return
    logger.info("Property type changed: %s -> %s", get_property_type(), property_type)
    st.session_state["property_type"] = property_type
    st.session_state["sections"] = build_sections(property_type)


def reset_sections():
    st.session_state["sections"] = build_sections(get_property_type())
