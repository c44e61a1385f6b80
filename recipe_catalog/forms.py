"""
Add/Edit recipe form state.

RecipeForm holds exactly what the form inputs hold: text for name,
description and price, plus the selected course button. It performs no
validation of its own; the store validates when the form is saved.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .models import Course, Recipe


def price_to_text(price: float) -> str:
    """Render a stored price for the price input ("45" for 45.0, "12.5" for 12.5)."""
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))


@dataclass
class RecipeForm:
    """Field values of the add/edit recipe form."""
    name: str = ""
    description: str = ""
    price: str = ""
    course: Course = field(default=Course.STARTERS)

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeForm":
        """Pre-fill the form for editing an existing recipe."""
        return cls(
            name=recipe.name,
            description=recipe.description,
            price=price_to_text(recipe.price),
            course=recipe.course,
        )

    def to_fields(self) -> Dict[str, Any]:
        """Field bag passed to RecipeStore.add() / RecipeStore.update()."""
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "course": self.course,
        }
