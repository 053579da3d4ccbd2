"""
Error types for the recipe finder core.

All errors raised by the core derive from RecipeFinderError so that callers can
catch the whole family at once. Controllers translate RemoteUnavailable and
NotFound into their own error state; PersistenceCorrupt never leaves the
favorites store.
"""

from typing import Optional


class RecipeFinderError(Exception):
    """Base class for all recipe finder errors."""
    pass


class RemoteUnavailable(RecipeFinderError):
    """
    Raised when the remote recipe source cannot be reached or answers with a
    non-success status.

    The original exception is available as `cause` (and as `__cause__` when
    raised with `from`).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class NotFound(RecipeFinderError):
    """Raised when a recipe id has no record upstream."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe {recipe_id!r} not found")
        self.recipe_id = recipe_id


class PersistenceCorrupt(RecipeFinderError):
    """Raised internally when stored favorites cannot be decoded."""
    pass


class InvalidInput(RecipeFinderError, ValueError):
    """Raised when a caller passes an unusable argument (e.g. a blank search term)."""
    pass


def user_message(error: BaseException, action: str) -> str:
    """
    Build the message shown to the user when a request ends in error.

    Args:
        error: The exception that ended the request
        action: What was being attempted, e.g. "search recipes"

    Returns:
        "Recipe not found" for NotFound, otherwise a retry hint that names the action
        and the underlying failure.

    Examples:
        >>> user_message(NotFound("52772"), "load recipe details")
        'Recipe not found'
        >>> user_message(RemoteUnavailable("HTTP 500"), "search recipes")
        'Failed to search recipes. Please try again. (HTTP 500)'
    """
    if isinstance(error, NotFound):
        return "Recipe not found"
    detail = str(error).strip()
    if detail:
        return f"Failed to {action}. Please try again. ({detail})"
    return f"Failed to {action}. Please try again."
