"""
Display strings shared by the catalog screens.
"""

from typing import Iterable, Optional

from .config import CatalogConfig
from .models import Recipe
from .query import count

EMPTY_LISTING_MESSAGE = "No recipes yet. Add one!"


def format_price(price: float) -> str:
    """Format a price with the configured currency symbol, e.g. "R45.00"."""
    return f"{CatalogConfig.get_currency_symbol()}{price:.2f}"


def recipe_meta(recipe: Recipe) -> str:
    """Subtitle shown under a recipe name, e.g. "Mains • R65.00"."""
    return f"{recipe.course.value} • {format_price(recipe.price)}"


def total_dishes_label(snapshot: Iterable[Recipe]) -> str:
    return f"Total dishes prepared: {count(snapshot)}"


def empty_listing_message(listing: Iterable[Recipe]) -> Optional[str]:
    """Placeholder for an empty home listing, or None when there is something to show."""
    if count(listing) == 0:
        return EMPTY_LISTING_MESSAGE
    return None
