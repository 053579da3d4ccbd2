"""
Feedback helpers for error, empty and loading states.

Every page shows failures, empty results and pending requests the same way.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = "Check your connection and search again.") -> None:
    """
    Display an error banner with an optional hint below it.

    Args:
        message: User-facing message (usually a snapshot's `error` field)
        hint: Optional follow-up hint; pass None to omit
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    action_page_path: Optional[str] = None,
) -> None:
    """
    Display an empty state with an optional navigation button.

    Args:
        title: Main message
        subtitle: Optional secondary text
        action_label: Button label, shown only together with `action_page_path`
        action_page_path: Page to switch to when the button is clicked
    """
    st.info(f"🍽️ **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_label and action_page_path:
        if st.button(action_label, type="primary"):
            st.switch_page(action_page_path)


@contextmanager
def working_spinner(label: str = "Loading…"):
    """
    Spinner shown while a remote request runs.

    Usage:
        with working_spinner("Searching for delicious recipes..."):
            run_async(services.search.search(term))
    """
    with st.spinner(label):
        yield
