"""
Session management utilities for Streamlit pages.

Streamlit reruns the page script on every interaction, so the recipe finder
services (search session, detail view, favorites) are created once per browser
session and kept in st.session_state. All pages share the same instance.
"""

import asyncio
from typing import Any, Awaitable, TypeVar

import streamlit as st

from recipe_finder import AppServices, build_app_services

SERVICES_KEY = "recipe_finder_services"

T = TypeVar("T")


def get_services() -> AppServices:
    """
    Get or create the recipe finder services for this browser session.

    Returns:
        AppServices stored in st.session_state
    """
    if SERVICES_KEY not in st.session_state:
        st.session_state[SERVICES_KEY] = build_app_services()
    return st.session_state[SERVICES_KEY]


def run_async(coro: Awaitable[T]) -> T:
    """
    Run a controller coroutine to completion from a Streamlit callback.

    Streamlit scripts run synchronously, one rerun at a time, so each call
    gets its own short-lived event loop.
    """
    return asyncio.run(coro)


def toggle_favorite(recipe: Any) -> None:
    """Button callback: flip favorite state of a recipe."""
    get_services().favorites.toggle(recipe)
