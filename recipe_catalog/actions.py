"""
Store-backed flows behind the catalog screens.

These are the operations the Add/Edit and Delete screens trigger. Destructive
flows take a `confirm(title, message) -> bool` callback supplied by the
presentation layer (an alert dialog on mobile, a prompt in tests) and only
touch the store when it returns True.

Validation and not-found errors are not caught here: they propagate to the
screen, which shows `str(error)` to the user.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .forms import RecipeForm
from .models import Recipe
from .store import RecipeStore

logger = logging.getLogger(__name__)

Confirm = Callable[[str, str], bool]

RECIPE_ADDED_MESSAGE = "Recipe added."
RECIPE_UPDATED_MESSAGE = "Recipe updated."
DELETE_TITLE = "Delete Recipe"
CLEAR_TITLE = "Clear all recipes"
CLEAR_MESSAGE = "Are you sure you want to delete ALL recipes?"


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a successful save: the stored recipe and the success message."""
    recipe: Recipe
    message: str


def save_recipe(store: RecipeStore, form: RecipeForm, recipe_id: Optional[str] = None) -> SaveResult:
    """
    Save the add/edit form.

    Args:
        store: Recipe store to write to
        form: Submitted form values
        recipe_id: Id of the recipe being edited, or None to add a new recipe

    Returns:
        SaveResult with the stored recipe and "Recipe added." / "Recipe updated."

    Raises:
        ValidationError: If the form values are invalid (store unchanged)
        NotFoundError: If recipe_id no longer exists
    """
    if recipe_id is None:
        return SaveResult(recipe=store.add(form.to_fields()), message=RECIPE_ADDED_MESSAGE)
    return SaveResult(recipe=store.update(recipe_id, form.to_fields()), message=RECIPE_UPDATED_MESSAGE)


def delete_recipe(store: RecipeStore, recipe: Recipe, confirm: Confirm) -> bool:
    """
    Delete a recipe after the user confirms.

    Returns:
        True if the user confirmed and the delete was applied, False if declined
    """
    if not confirm(DELETE_TITLE, f'Delete "{recipe.name}"?'):
        logger.debug("Delete of recipe %s cancelled", recipe.id)
        return False
    store.delete(recipe.id)
    return True


def clear_recipes(store: RecipeStore, confirm: Confirm) -> bool:
    """Remove every recipe after the user confirms. Returns whether the store was cleared."""
    if not confirm(CLEAR_TITLE, CLEAR_MESSAGE):
        logger.debug("Clear all recipes cancelled")
        return False
    store.clear()
    return True
