"""
Read-only views over a recipe snapshot.

Every function here is pure: it takes a snapshot (as returned by
RecipeStore.list()) and returns a new tuple without touching the store.
Results keep store order, i.e. most recently added first.
"""

import logging
from typing import Iterable, Optional, Tuple

from .config import CatalogConfig
from .models import Recipe

logger = logging.getLogger(__name__)


def _matches(recipe: Recipe, needle: str) -> bool:
    return (
        needle in recipe.name.lower()
        or needle in recipe.description.lower()
        or needle in recipe.course.value.lower()
    )


def search(snapshot: Iterable[Recipe], text: Optional[str]) -> Tuple[Recipe, ...]:
    """
    Case-insensitive substring search over name, description and course.

    Args:
        snapshot: Recipes to search
        text: Search box contents; empty or whitespace-only returns everything

    Returns:
        Matching recipes in store order. "MAINS" finds every Mains dish
        through its course, "salad" finds "Greek Salad" through its name.
    """
    recipes = tuple(snapshot)
    if not text or not text.strip():
        return recipes
    needle = text.lower()
    results = tuple(recipe for recipe in recipes if _matches(recipe, needle))
    logger.debug("Search %r matched %d of %d recipes", text, len(results), len(recipes))
    return results


def preview(snapshot: Iterable[Recipe], limit: int) -> Tuple[Recipe, ...]:
    """
    Return the first `limit` recipes in store order.

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"Preview limit must not be negative, got {limit}")
    return tuple(snapshot)[:limit]


def count(snapshot: Iterable[Recipe]) -> int:
    """Number of recipes in the snapshot (the "total dishes prepared" figure)."""
    return len(tuple(snapshot))


def visible(
    snapshot: Iterable[Recipe],
    text: Optional[str] = "",
    show_all: bool = False,
    limit: Optional[int] = None,
) -> Tuple[Recipe, ...]:
    """
    Recipes the home screen lists for the current search box and toggle.

    A blank search shows the collapsed preview (CATALOG_PREVIEW_LIMIT recipes,
    6 by default) until the user taps "Show all". A non-blank search shows
    every match regardless of the toggle.
    """
    if text and text.strip():
        return search(snapshot, text)
    if show_all:
        return tuple(snapshot)
    if limit is None:
        limit = CatalogConfig.get_preview_limit()
    return preview(snapshot, limit)
