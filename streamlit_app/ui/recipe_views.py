"""
Recipe list, filter and detail components.

These components only read controller snapshots and call the controller
operations; they hold no state of their own.
"""

from typing import List

import streamlit as st

from recipe_finder import AppServices
from recipe_finder.filters import AREAS, CATEGORIES, COOKING_TIMES, DIET_OPTIONS
from recipe_finder.models import DetailStatus, RecipeSummary

from ui.feedback import show_error, working_spinner
from utils.session import run_async, toggle_favorite

# Number of columns in the recipe grid
GRID_COLUMNS = 3

# Cuisine buttons shown in the filter panel
VISIBLE_AREAS = 12


def _filter_buttons(services: AppServices, axis: str, options: dict, key_prefix: str) -> None:
    current = getattr(services.search.filters, axis)
    cols = st.columns(min(len(options), 7))
    for i, (value, label) in enumerate(options.items()):
        with cols[i % len(cols)]:
            st.button(
                label,
                key=f"{key_prefix}_{axis}_{value}",
                type="primary" if current == value else "secondary",
                on_click=services.search.toggle_filter,
                args=(axis, value),
            )


def render_filter_panel(services: AppServices, key_prefix: str = "filters") -> None:
    """
    Render the four filter axes as toggle buttons.

    Clicking the selected value again clears that axis.
    """
    active = services.search.filters.active_count
    label = f"Filters ({active})" if active else "Filters"
    with st.expander(label, expanded=False):
        if active:
            st.button("✖ Clear all", key=f"{key_prefix}_clear", on_click=services.search.clear_filters)

        st.markdown("**Category**")
        _filter_buttons(services, "category", {c: c for c in CATEGORIES}, key_prefix)

        st.markdown("**Cuisine**")
        _filter_buttons(services, "area", {a: a for a in AREAS[:VISIBLE_AREAS]}, key_prefix)

        st.markdown("**Cooking Time**")
        _filter_buttons(services, "cooking_time", COOKING_TIMES, key_prefix)

        st.markdown("**Diet**")
        _filter_buttons(services, "diet", DIET_OPTIONS, key_prefix)


def _open_detail(services: AppServices, recipe: RecipeSummary) -> None:
    with working_spinner("Loading recipe..."):
        run_async(services.detail.open(recipe))


def render_recipe_grid(services: AppServices, recipes: List[RecipeSummary], key_prefix: str) -> None:
    """
    Render recipe cards with favorite and details buttons.

    Args:
        services: Session services
        recipes: Recipes to show, in order
        key_prefix: Prefix keeping widget keys unique per page
    """
    favorites = services.favorites
    for row_start in range(0, len(recipes), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, recipe in zip(cols, recipes[row_start:row_start + GRID_COLUMNS]):
            with col:
                if recipe.thumbnail:
                    st.image(recipe.thumbnail, use_container_width=True)
                st.markdown(f"**{recipe.name}**")
                tags = " · ".join(tag for tag in (recipe.category, recipe.area) if tag)
                if tags:
                    st.caption(tags)

                is_favorite = favorites.is_favorite(recipe)
                fav_col, view_col = st.columns(2)
                with fav_col:
                    st.button(
                        "❤️ Saved" if is_favorite else "🤍 Save",
                        key=f"{key_prefix}_fav_{recipe.id}",
                        on_click=toggle_favorite,
                        args=(recipe,),
                    )
                with view_col:
                    st.button(
                        "View recipe",
                        key=f"{key_prefix}_view_{recipe.id}",
                        on_click=_open_detail,
                        args=(services, recipe),
                    )


def render_detail_panel(services: AppServices, key_prefix: str) -> None:
    """Render the open recipe's details, or nothing if no recipe is open."""
    snapshot = services.detail.snapshot()
    if snapshot.recipe is None:
        return

    st.divider()
    title_col, fav_col, close_col = st.columns([6, 1, 1])
    with title_col:
        st.subheader(snapshot.recipe.name)
    with fav_col:
        is_favorite = services.favorites.is_favorite(snapshot.recipe)
        st.button(
            "❤️" if is_favorite else "🤍",
            key=f"{key_prefix}_detail_fav",
            on_click=toggle_favorite,
            args=(snapshot.recipe,),
        )
    with close_col:
        st.button("✖", key=f"{key_prefix}_detail_close", on_click=services.detail.close)

    if snapshot.status == DetailStatus.LOADING:
        st.info("Loading recipe...")
        return

    if snapshot.status == DetailStatus.ERROR:
        show_error(snapshot.error or "Something went wrong", hint=None)
        return

    detail = snapshot.detail
    if detail is None:
        return

    image_col, info_col = st.columns(2)
    with image_col:
        if detail.thumbnail:
            st.image(detail.thumbnail, use_container_width=True)
    with info_col:
        st.markdown("#### Recipe Info")
        if detail.category:
            st.markdown(f"Category: **{detail.category}**")
        if detail.area:
            st.markdown(f"Cuisine: **{detail.area}**")
        if detail.tags:
            st.caption(", ".join(detail.tags))
        if detail.video_url:
            st.link_button("▶ Watch Video Tutorial", detail.video_url)
        if detail.source_url:
            st.link_button("🔗 Original recipe", detail.source_url)

    st.markdown("#### Ingredients")
    ing_cols = st.columns(2)
    for i, line in enumerate(detail.ingredients):
        with ing_cols[i % 2]:
            st.markdown(f"- **{line.measure}** {line.ingredient}" if line.measure else f"- {line.ingredient}")

    st.markdown("#### Instructions")
    for step in detail.instruction_steps:
        st.markdown(step)
