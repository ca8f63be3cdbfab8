"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional

from config.defaults import USAGE_RENTED, USAGE_VACANT


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    kwargs = {"height": height} if height else {}
    st.dataframe(df, use_container_width=use_container_width, hide_index=True, **kwargs)


def render_lease_table(df: pd.DataFrame, usage_column: str = "Usage"):
    """Render a lease table with color-coded usage labels."""
    def color_usage(val):
        if val == USAGE_RENTED:
            return "background-color: #fde3d9; color: #a34a28; font-weight: bold"
        elif val == USAGE_VACANT:
            return "background-color: #eeeeee; color: #666666"
        return "background-color: #dbe9f8; color: #1f4e79"

    if usage_column in df.columns and not df.empty:
        styled = df.style.map(color_usage, subset=[usage_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
