"""
Error types raised by the recipe catalog.

All catalog errors derive from CatalogError so presentation code can catch
the whole family in one place. ValidationError and NotFoundError carry the
details a screen needs to show an alert to the user.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for recipe catalog errors."""


class ValidationError(CatalogError):
    """
    A draft or update failed a recipe invariant.

    Attributes:
        field: Name of the offending field (e.g. "price"), or None if the
            failure is not tied to a single field
        reason: Human-readable message suitable for display
    """

    def __init__(self, reason: str, field: Optional[str] = None) -> None:
        super().__init__(reason)
        self.field = field
        self.reason = reason


class NotFoundError(CatalogError):
    """No live recipe has the requested id."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id
