"""
Reusable UI components for the Recipe Finder Streamlit app.
"""

from ui.feedback import show_error, show_empty_state, working_spinner
from ui.recipe_views import render_detail_panel, render_filter_panel, render_recipe_grid

__all__ = [
    "show_error",
    "show_empty_state",
    "working_spinner",
    "render_detail_panel",
    "render_filter_panel",
    "render_recipe_grid",
]
