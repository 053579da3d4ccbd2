"""
Recipe Finder - Streamlit Frontend Main Entry Point.

This page lets the user search recipes by ingredient, filter the results,
open recipe details and save favorites. The saved favorites page lives in
`pages/`, which Streamlit adds to the sidebar navigation automatically.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_finder
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from recipe_finder.errors import InvalidInput
from recipe_finder.models import SearchStatus
from ui.feedback import show_empty_state, show_error, working_spinner
from ui.recipe_views import render_detail_panel, render_filter_panel, render_recipe_grid
from utils.session import get_services, run_async

# Quick-start ingredients on the welcome screen
SUGGESTED_INGREDIENTS = [
    ("Chicken", "🐔"),
    ("Pork", "🥓"),
    ("Cheese", "🧀"),
    ("Rice", "🍚"),
]

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Finder",
    page_icon="🍳",
    layout="wide",
)

services = get_services()


def run_search(term: str) -> None:
    """Run a search and report blank input instead of raising."""
    try:
        with working_spinner("Searching for delicious recipes..."):
            run_async(services.search.search(term))
    except InvalidInput:
        st.warning("Enter an ingredient to search for.")


with st.sidebar:
    st.markdown("### 🍳 **Recipe Finder**")
    st.divider()
    st.markdown(f"**Favorites:** {services.favorites.count}")

st.title("Discover Amazing Recipe Ideas")
st.caption("Search thousands of recipes by ingredient and create delicious meals")

with st.form("search_form", clear_on_submit=False):
    term = st.text_input(
        "Ingredient",
        value=services.search.query or "",
        placeholder="What ingredient do you have? (e.g., chicken, tomato, pasta)",
    )
    submitted = st.form_submit_button("Search", type="primary")

if submitted:
    run_search(term)

snapshot = services.search.snapshot()

if snapshot.status == SearchStatus.IDLE:
    st.subheader("Ready to Cook?")
    st.write(
        "Enter any ingredient above to discover amazing recipes. "
        "From quick weeknight dinners to weekend feasts, we've got you covered!"
    )
    cols = st.columns(len(SUGGESTED_INGREDIENTS))
    for col, (ingredient, emoji) in zip(cols, SUGGESTED_INGREDIENTS):
        with col:
            st.button(
                f"{emoji} {ingredient}",
                key=f"suggest_{ingredient}",
                on_click=run_search,
                args=(ingredient.lower(),),
                use_container_width=True,
            )
else:
    render_filter_panel(services, key_prefix="search")

    if snapshot.status == SearchStatus.ERROR:
        show_error(snapshot.error or "Search failed")

    st.subheader("Recipe Results")
    st.caption(f"Showing {snapshot.showing} of {snapshot.total} recipes")

    if snapshot.status == SearchStatus.POPULATED and snapshot.total == 0:
        show_empty_state(
            "No recipes found",
            f"We couldn't find any recipes with \"{snapshot.query}\". Try a different ingredient!",
        )
    elif snapshot.total and not snapshot.showing:
        show_empty_state("No recipes match the current filters", "Clear a filter to see more results.")
    else:
        render_recipe_grid(services, snapshot.filtered_results, key_prefix="search")

render_detail_panel(services, key_prefix="search")
