"""
In-memory recipe store for the app session.

RecipeStore owns the authoritative list of recipes. Screens receive a handle
to one store and only change it through its operations:

- add / update / delete / clear mutate the collection
- list returns an immutable snapshot (tuple of frozen Recipe models)
- subscribe registers a listener that is told about every effective mutation

Recipes are kept most-recently-added first. Validation always happens before
any mutation, so a rejected add or update leaves the store untouched.

Note: Nothing here is persisted. Recipes are lost when the process ends.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from .config import CatalogConfig
from .errors import CatalogError, NotFoundError, ValidationError
from .ids import IdGenerator, get_id_generator, uuid_id_generator
from .models import ID_READ_ONLY, Recipe, RecipeDraft, parse_draft

logger = logging.getLogger(__name__)

Snapshot = Tuple[Recipe, ...]

ACTION_ADDED = "added"
ACTION_UPDATED = "updated"
ACTION_DELETED = "deleted"
ACTION_CLEARED = "cleared"


@dataclass(frozen=True)
class StoreChange:
    """Notification sent to listeners after a mutation."""
    action: str
    recipe_id: Optional[str]
    snapshot: Snapshot


Listener = Callable[[StoreChange], None]


class RecipeStore:
    """Authoritative in-memory collection of recipes."""

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._id_generator = id_generator or uuid_id_generator
        self._recipes: List[Recipe] = []
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._recipes)

    def __contains__(self, recipe_id: object) -> bool:
        return self._index_of(recipe_id) is not None

    def _index_of(self, recipe_id: object) -> Optional[int]:
        for index, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return index
        return None

    def list(self) -> Snapshot:
        """Return all recipes, most recently added first."""
        return tuple(self._recipes)

    def get(self, recipe_id: str) -> Recipe:
        """
        Return the recipe with the given id.

        Raises:
            NotFoundError: If no live recipe has this id
        """
        index = self._index_of(recipe_id)
        if index is None:
            raise NotFoundError(recipe_id)
        return self._recipes[index]

    def add(self, draft: Union[RecipeDraft, Mapping[str, Any]]) -> Recipe:
        """
        Validate a draft, assign it a fresh id and store it at the front.

        Args:
            draft: RecipeDraft or mapping with name, description, price
                (text or number) and optionally course

        Returns:
            The stored Recipe

        Raises:
            ValidationError: If the draft fails validation
            CatalogError: If the id generator returns an id already in use
        """
        with self._lock:
            try:
                valid = parse_draft(draft)
            except ValidationError as exc:
                logger.info("Rejected new recipe: %s", exc.reason)
                raise

            recipe_id = self._id_generator()
            if recipe_id in self:
                raise CatalogError(f"Id generator returned an id already in use: {recipe_id}")

            recipe = Recipe(id=recipe_id, **valid.model_dump())
            self._recipes.insert(0, recipe)
            logger.info("Added recipe %s (%s)", recipe.id, recipe.name)
            self._notify(ACTION_ADDED, recipe.id)
            return recipe

    def update(self, recipe_id: str, partial: Mapping[str, Any]) -> Recipe:
        """
        Apply field changes to an existing recipe.

        The recipe keeps its id and its position in the store. Fields not in
        `partial` keep their current values, so an empty partial changes
        nothing.

        Raises:
            NotFoundError: If no live recipe has this id
            ValidationError: If the merged recipe fails validation, or
                `partial` tries to change the id
        """
        with self._lock:
            index = self._index_of(recipe_id)
            if index is None:
                logger.info("Rejected update of unknown recipe %s", recipe_id)
                raise NotFoundError(recipe_id)

            current = self._recipes[index]
            changes: Dict[str, Any] = dict(partial)
            if "id" in changes:
                if changes.pop("id") != current.id:
                    logger.info("Rejected update of recipe %s: id change", recipe_id)
                    raise ValidationError(ID_READ_ONLY, field="id")

            try:
                valid = parse_draft({**current.editable_fields(), **changes})
            except ValidationError as exc:
                logger.info("Rejected update of recipe %s: %s", recipe_id, exc.reason)
                raise

            recipe = Recipe(id=current.id, **valid.model_dump())
            self._recipes[index] = recipe
            logger.info("Updated recipe %s (%s)", recipe.id, recipe.name)
            self._notify(ACTION_UPDATED, recipe.id)
            return recipe

    def delete(self, recipe_id: str) -> None:
        """Remove a recipe. Deleting an id that is not present is a no-op."""
        with self._lock:
            index = self._index_of(recipe_id)
            if index is None:
                logger.debug("Delete of absent recipe %s ignored", recipe_id)
                return
            removed = self._recipes.pop(index)
            logger.info("Deleted recipe %s (%s)", removed.id, removed.name)
            self._notify(ACTION_DELETED, removed.id)

    def clear(self) -> None:
        """Remove every recipe."""
        with self._lock:
            count = len(self._recipes)
            self._recipes.clear()
            logger.info("Cleared %d recipes", count)
            self._notify(ACTION_CLEARED, None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with a StoreChange after every mutation.

        Returns:
            A callable that unregisters the listener (safe to call twice)
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, action: str, recipe_id: Optional[str]) -> None:
        # Listener failures are logged; the mutation stands
        change = StoreChange(action=action, recipe_id=recipe_id, snapshot=self.list())
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Recipe store listener failed on %s", action)


def create_store() -> RecipeStore:
    """Build a RecipeStore using the configured id strategy (CATALOG_ID_STRATEGY)."""
    return RecipeStore(id_generator=get_id_generator(CatalogConfig.get_id_strategy()))
