"""
Recipe models for the catalog.

This module defines the canonical recipe schemas used throughout the catalog.
Everything a screen submits is parsed into a RecipeDraft first; the store then
stamps an id on a valid draft to produce the Recipe it keeps.

Field rules (shared by drafts and stored recipes):
- name, description: required text, stored with surrounding whitespace trimmed
- price: required, accepts text from the price input ("45.00") or a number,
  must be a finite number >= 0
- course: one of Starters, Mains, Desserts (defaults to Starters, the form's
  initial selection)

Pydantic validation errors never leave this module: parse_draft() converts
them into catalog ValidationError instances carrying the message the app
shows in its validation alert.
"""

import math
import re
from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

NAME_REQUIRED = "Dish name is required."
DESCRIPTION_REQUIRED = "Description is required."
PRICE_REQUIRED = "Price is required."
PRICE_INVALID = "Price must be a valid non-negative number."
COURSE_INVALID = "Course must be one of: Starters, Mains, Desserts."
ID_READ_ONLY = "Recipe id is assigned by the catalog and cannot be set."

# Plain decimal text: optional sign, digits, optional fraction and exponent
_PRICE_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_REQUIRED_MESSAGES = {
    "name": NAME_REQUIRED,
    "description": DESCRIPTION_REQUIRED,
    "price": PRICE_REQUIRED,
    "course": COURSE_INVALID,
}


class Course(str, Enum):
    """The fixed course a recipe is listed under."""

    STARTERS = "Starters"
    MAINS = "Mains"
    DESSERTS = "Desserts"

    @classmethod
    def parse(cls, value: Any) -> "Course":
        """
        Resolve a Course from a Course or its text value.

        Text is matched case-insensitively after trimming, so "mains" and
        " Mains " both resolve to Course.MAINS.

        Raises:
            ValueError: If the value does not name a course
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for course in cls:
                if course.value.lower() == wanted:
                    return course
        raise ValueError(COURSE_INVALID)

    def __str__(self) -> str:
        return self.value


def _parse_price(value: Any) -> float:
    """Parse a price from form text or a number, rejecting anything not finite and >= 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(PRICE_REQUIRED)
    # bool is an int subclass; a checkbox value is not a price
    if isinstance(value, bool):
        raise ValueError(PRICE_INVALID)
    if isinstance(value, str):
        value = value.strip()
        if not _PRICE_PATTERN.fullmatch(value):
            raise ValueError(PRICE_INVALID)
    try:
        price = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(PRICE_INVALID)
    if not math.isfinite(price) or price < 0:
        raise ValueError(PRICE_INVALID)
    # "-0" parses to -0.0
    return price + 0.0


class RecipeDraft(BaseModel):
    """
    A candidate recipe submitted by the user, validated but not yet stored.

    Drafts have no id; the store assigns one when the draft is added.
    """
    name: str = Field(..., description="Dish name")
    description: str = Field(..., description="Short description of the dish")
    price: float = Field(..., ge=0, description="Price in rand")
    course: Course = Field(default=Course.STARTERS, description="Course the dish is served as")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(NAME_REQUIRED)
        return value.strip()

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(DESCRIPTION_REQUIRED)
        return value.strip()

    @field_validator("price", mode="before")
    @classmethod
    def _check_price(cls, value: Any) -> float:
        return _parse_price(value)

    @field_validator("course", mode="before")
    @classmethod
    def _check_course(cls, value: Any) -> Course:
        return Course.parse(value)


class Recipe(RecipeDraft):
    """
    A stored recipe.

    Instances are frozen: the only way to change a recipe is through
    RecipeStore.update(), which replaces the record with a new instance.
    """
    id: str = Field(..., min_length=1, description="Opaque identifier assigned by the store")

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": "3f2b9c4e8d1a4f6b9e0c7d5a2b1c3e4f",
                "name": "Chicken Alfredo",
                "description": "Creamy pasta with grilled chicken",
                "price": 65.0,
                "course": "Mains",
            }
        },
    )

    def editable_fields(self) -> dict:
        """Return the editable fields (everything except id)."""
        return self.model_dump(exclude={"id"})


def _to_catalog_error(exc: PydanticValidationError) -> ValidationError:
    """Convert the first pydantic error into a catalog ValidationError."""
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    error_type = error.get("type")

    if error_type == "missing" and field in _REQUIRED_MESSAGES:
        return ValidationError(_REQUIRED_MESSAGES[field], field=field)
    if error_type == "extra_forbidden":
        if field == "id":
            return ValidationError(ID_READ_ONLY, field=field)
        return ValidationError(f"Unknown recipe field: {field}", field=field)

    ctx_error = (error.get("ctx") or {}).get("error")
    if isinstance(ctx_error, ValueError):
        return ValidationError(str(ctx_error), field=field)
    if field in _REQUIRED_MESSAGES:
        return ValidationError(_REQUIRED_MESSAGES[field], field=field)
    return ValidationError(error.get("msg", "Invalid recipe."), field=field)


def parse_draft(fields: Union[RecipeDraft, Mapping[str, Any]]) -> RecipeDraft:
    """
    Validate a submitted field bag into a RecipeDraft.

    Args:
        fields: A RecipeDraft (returned as-is) or a mapping with the keys
            name, description, price and optionally course

    Returns:
        Validated RecipeDraft with trimmed text, float price and a Course

    Raises:
        ValidationError: If any field fails validation. When several fields
            fail, the first of name, description, price, course is reported.
    """
    if isinstance(fields, BaseModel):
        if type(fields) is RecipeDraft:
            return fields
        # a stored Recipe carries its id, which a draft may not
        fields = fields.model_dump()
    try:
        return RecipeDraft.model_validate(dict(fields))
    except PydanticValidationError as exc:
        raise _to_catalog_error(exc) from exc
