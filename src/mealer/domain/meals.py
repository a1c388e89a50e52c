"""Meal model.

The catalog and menu only care about two attributes: ``meal_id`` (the
key under which a meal is stored) and ``is_offered``.  Everything else
is descriptive data carried along for the caller.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MealType(StrEnum):
    """Course a meal is served as."""

    APPETIZER = "appetizer"
    MAIN = "main"
    DESSERT = "dessert"
    BEVERAGE = "beverage"
    SIDE = "side"


class Meal(BaseModel):
    """A meal a chef can put in their catalog and publish on their menu.

    ``meal_id`` is frozen once the model is constructed.  An empty ID is
    allowed here so the catalog can report it as a validation failure
    rather than the model raising on construction.
    """

    model_config = ConfigDict(validate_assignment=True)

    meal_id: str = Field(default="", frozen=True)
    is_offered: bool = False
    name: str = ""
    price: float = Field(default=0.0, ge=0)
    description: str = ""
    cuisine: str = ""
    meal_type: MealType | None = None
    chef_id: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    allergens: list[str] = Field(default_factory=list)
