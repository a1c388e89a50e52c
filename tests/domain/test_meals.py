"""Tests for the Meal model."""

import pytest
from pydantic import ValidationError

from mealer.domain.meals import Meal, MealType


class TestMeal:
    def test_defaults(self) -> None:
        meal = Meal(meal_id="m1")
        assert meal.meal_id == "m1"
        assert meal.is_offered is False
        assert meal.ingredients == []
        assert meal.meal_type is None

    def test_empty_id_is_constructible(self) -> None:
        assert Meal().meal_id == ""

    def test_meal_id_is_frozen(self) -> None:
        meal = Meal(meal_id="m1")
        with pytest.raises(ValidationError):
            meal.meal_id = "m2"  # type: ignore[misc]

    def test_offered_flag_is_assignable(self) -> None:
        meal = Meal(meal_id="m1")
        meal.is_offered = True
        assert meal.is_offered is True

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Meal(meal_id="m1", price=-1)

    def test_meal_type_from_string(self) -> None:
        meal = Meal(meal_id="m1", meal_type="dessert")
        assert meal.meal_type is MealType.DESSERT
