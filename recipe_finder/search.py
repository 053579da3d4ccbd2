"""
Search session controller.

This module orchestrates an ingredient search for the presentation layer:
- Validates the search term and moves the session to "loading"
- Runs the remote search in a worker thread so the event loop stays free
- Stores the raw results and derives the filtered view with apply_filters
- Recomputes the filtered view locally whenever the filters change

State machine: idle -> loading -> {populated, error}; populated/error -> loading
on the next search. An empty result list is "populated", not "error".

Search flow: UI -> SearchController.search() -> source.search_by_ingredient() ->
raw results -> apply_filters() -> filtered results -> SearchSnapshot

# NOTE: Every search is tagged with a sequence number. Only the response to the
    most recent search is applied; responses to superseded searches are dropped.
"""

import asyncio
import logging
from typing import List, Optional

from recipe_finder.connectors.base import BaseRecipeSource
from recipe_finder.errors import InvalidInput, RecipeFinderError, user_message
from recipe_finder.filters import apply_filters
from recipe_finder.models import ActiveFilterSet, RecipeSummary, SearchSnapshot, SearchStatus

logger = logging.getLogger(__name__)


class SearchController:
    """
    Holds one search session and exposes it as immutable snapshots.

    The filtered results are never edited directly: they are recomputed from
    the raw results and the active filters after every change to either.
    """

    def __init__(self, source: BaseRecipeSource, filters: Optional[ActiveFilterSet] = None) -> None:
        self.source = source
        self._status = SearchStatus.IDLE
        self._query: Optional[str] = None
        self._raw_results: List[RecipeSummary] = []
        self._filters = filters or ActiveFilterSet()
        self._filtered_results: List[RecipeSummary] = []
        self._error: Optional[str] = None
        self._sequence = 0

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def query(self) -> Optional[str]:
        return self._query

    @property
    def raw_results(self) -> List[RecipeSummary]:
        return list(self._raw_results)

    @property
    def filtered_results(self) -> List[RecipeSummary]:
        return list(self._filtered_results)

    @property
    def filters(self) -> ActiveFilterSet:
        return self._filters

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def has_searched(self) -> bool:
        return self._status != SearchStatus.IDLE

    def snapshot(self) -> SearchSnapshot:
        """Current session state for presentation."""
        return SearchSnapshot(
            status=self._status,
            query=self._query,
            raw_results=self._raw_results,
            filtered_results=self._filtered_results,
            filters=self._filters,
            error=self._error,
        )

    def _recompute(self) -> None:
        self._filtered_results = apply_filters(self._raw_results, self._filters)

    async def search(self, term: str) -> SearchSnapshot:
        """
        Run an ingredient search.

        Args:
            term: Ingredient to search for; surrounding whitespace is ignored

        Returns:
            Snapshot after this call completes. If a newer search was issued in
            the meantime, the snapshot reflects that search instead.

        Raises:
            InvalidInput: If `term` is blank. The session is left unchanged.
        """
        if term is None or not term.strip():
            raise InvalidInput("Search term must not be empty")

        term = term.strip()
        self._sequence += 1
        request_id = self._sequence

        self._status = SearchStatus.LOADING
        self._query = term
        self._error = None
        logger.info("Search request #%d: ingredient=%r", request_id, term)

        try:
            results = await asyncio.to_thread(self.source.search_by_ingredient, term)
        except RecipeFinderError as e:
            if request_id != self._sequence:
                logger.debug("Discarding failure of superseded search #%d: %s", request_id, e)
                return self.snapshot()
            logger.warning("Search #%d for %r failed: %s", request_id, term, e)
            # Raw and filtered results keep their previous values
            self._status = SearchStatus.ERROR
            self._error = user_message(e, "search recipes")
            return self.snapshot()

        if request_id != self._sequence:
            logger.debug("Discarding %d results of superseded search #%d", len(results), request_id)
            return self.snapshot()

        self._raw_results = list(results)
        self._recompute()
        self._status = SearchStatus.POPULATED
        logger.info(
            "Search #%d for %r: %d results, %d after filters",
            request_id, term, len(self._raw_results), len(self._filtered_results),
        )
        return self.snapshot()

    def set_filters(self, filters: Optional[ActiveFilterSet]) -> SearchSnapshot:
        """
        Replace the active filters and recompute the filtered view.

        No remote call is made; the current raw results are re-filtered.
        None is treated as an empty filter set.
        """
        self._filters = filters or ActiveFilterSet()
        self._recompute()
        logger.debug(
            "Filters changed to %s: %d of %d results shown",
            self._filters.model_dump(exclude_none=True), len(self._filtered_results), len(self._raw_results),
        )
        return self.snapshot()

    def toggle_filter(self, axis: str, value: Optional[str]) -> SearchSnapshot:
        """Select `value` on `axis`, or clear the axis if it already holds it."""
        return self.set_filters(self._filters.toggle(axis, value))

    def clear_filters(self) -> SearchSnapshot:
        return self.set_filters(ActiveFilterSet())
