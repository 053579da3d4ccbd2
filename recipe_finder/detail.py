"""
Detail fetch controller.

Loads the full record of one recipe for an open detail view, with its own
loading/error state. Nothing is cached between views: closing the view drops
the record, and opening it again fetches it again.
"""

import asyncio
import logging
from typing import Optional

from recipe_finder.connectors.base import BaseRecipeSource
from recipe_finder.errors import NotFound, RecipeFinderError, user_message
from recipe_finder.models import DetailSnapshot, DetailStatus, RecipeDetail, RecipeSummary

logger = logging.getLogger(__name__)


class DetailController:
    """
    State of a single detail view: idle -> loading -> {loaded, error}.

    Lookups are sequence-tagged like searches. A response is applied only if
    no newer open() or close() happened while it was in flight.
    """

    def __init__(self, source: BaseRecipeSource) -> None:
        self.source = source
        self._sequence = 0
        self._reset()

    def _reset(self) -> None:
        self._status = DetailStatus.IDLE
        self._recipe: Optional[RecipeSummary] = None
        self._detail: Optional[RecipeDetail] = None
        self._error: Optional[str] = None

    @property
    def status(self) -> DetailStatus:
        return self._status

    @property
    def recipe(self) -> Optional[RecipeSummary]:
        return self._recipe

    @property
    def detail(self) -> Optional[RecipeDetail]:
        return self._detail

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_open(self) -> bool:
        return self._recipe is not None

    def snapshot(self) -> DetailSnapshot:
        return DetailSnapshot(
            status=self._status,
            recipe=self._recipe,
            detail=self._detail,
            error=self._error,
        )

    async def open(self, recipe: RecipeSummary) -> DetailSnapshot:
        """
        Open the detail view for a recipe and fetch its full record.

        Args:
            recipe: The recipe selected in a list view

        Returns:
            Snapshot after the lookup. It is "loaded" with the record, or
            "error" with "Recipe not found" or a failure message.
        """
        self._sequence += 1
        request_id = self._sequence

        self._status = DetailStatus.LOADING
        self._recipe = recipe
        self._detail = None
        self._error = None
        logger.info("Detail request #%d: recipe id=%r", request_id, recipe.id)

        try:
            detail = await asyncio.to_thread(self.source.lookup_by_id, recipe.id)
            if detail is None:
                raise NotFound(recipe.id)
        except RecipeFinderError as e:
            if request_id != self._sequence:
                logger.debug("Discarding failure of superseded detail request #%d: %s", request_id, e)
                return self.snapshot()
            logger.warning("Detail request #%d for id=%r failed: %s", request_id, recipe.id, e)
            self._status = DetailStatus.ERROR
            self._error = user_message(e, "load recipe details")
            return self.snapshot()

        if request_id != self._sequence:
            logger.debug("Discarding superseded detail response #%d", request_id)
            return self.snapshot()

        self._detail = detail
        self._status = DetailStatus.LOADED
        return self.snapshot()

    def close(self) -> None:
        """Close the view and discard all detail state, including in-flight lookups."""
        self._sequence += 1
        self._reset()
