"""CatalogService — a chef's meals and the menu published from them.

Two keyed collections are owned here:

- the **catalog** (every meal the chef has added), and
- the **menu** (meals currently published for ordering).

Only offered meals may enter the menu.  Publishing validates against the
menu's own entry for the ID, not the catalog: a meal can only be
(re)published if it already sits in the menu and is offered.  Seed the
menu through the constructor to restore a previously published menu;
every seeded menu meal must be in the seeded catalog and offered.

INVARIANT: Every operation applies its full effect or leaves both
collections unchanged.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping

from mealer.domain.ids import is_valid_id
from mealer.domain.meals import Meal
from mealer.services.result import ErrorCode, Response, Result

logger = logging.getLogger(__name__)

MSG_INVALID_MEAL_ID = "Invalid meal ID provided"
MSG_MEAL_WITHOUT_ID = "Meal does not have a valid ID"
MSG_MEAL_NOT_FOUND = "Could not find any meal for the provided meal ID"
MSG_MENU_MEAL_NOT_FOUND = "Could not find the any meal for the provided ID"
MSG_MEAL_EXISTS = "Meal with same ID already exists! Use updateMeal to update an existing meal"
MSG_MEAL_NOT_OFFERED = "Meal is currently not being offered by the chef"


def _checked_collection(name: str, meals: Mapping[str, Meal] | None) -> dict[str, Meal]:
    """Copy *meals* into a dict, rejecting keys that differ from the meal ID."""
    collection: dict[str, Meal] = {}
    for key, meal in (meals or {}).items():
        if not is_valid_id(key) or key != meal.meal_id:
            msg = f"{name} key {key!r} does not match meal ID {meal.meal_id!r}"
            raise ValueError(msg)
        collection[key] = meal
    return collection


class CatalogService:
    """Synchronous catalog and menu management for a single chef.

    A re-entrant lock guards the catalog/menu pair so callers on
    different threads observe a consistent joint state.
    """

    def __init__(
        self,
        meals: Mapping[str, Meal] | None = None,
        menu: Mapping[str, Meal] | None = None,
    ) -> None:
        self._meals = _checked_collection("catalog", meals)
        self._menu = _checked_collection("menu", menu)
        for key, meal in self._menu.items():
            listed = self._meals.get(key)
            if listed is None:
                raise ValueError(f"menu meal {key!r} is not in the catalog")
            if not (meal.is_offered and listed.is_offered):
                raise ValueError(f"menu meal {key!r} is not offered")
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    def get_meal(self, meal_id: str) -> Result[Meal]:
        """Retrieve a meal from the catalog by ID."""
        if not is_valid_id(meal_id):
            return Result.failure(ErrorCode.INVALID_ID, MSG_INVALID_MEAL_ID)
        with self._lock:
            meal = self._meals.get(meal_id)
        if meal is None:
            return Result.failure(ErrorCode.NOT_FOUND, MSG_MEAL_NOT_FOUND, meal_id=meal_id)
        return Result.success(meal)

    def add_meal(self, meal: Meal | None) -> Response:
        """Add a new meal to the catalog (not the menu).

        Existing meals are never overwritten; there is no update path here.
        """
        if meal is None or not is_valid_id(meal.meal_id):
            return Response.failed(ErrorCode.INVALID_ID, MSG_MEAL_WITHOUT_ID)
        with self._lock:
            if meal.meal_id in self._meals:
                return Response.failed(
                    ErrorCode.ALREADY_EXISTS, MSG_MEAL_EXISTS, meal_id=meal.meal_id
                )
            self._meals[meal.meal_id] = meal
        logger.debug("Added meal %s to catalog", meal.meal_id)
        return Response.succeeded()

    def remove_meal(self, meal_id: str) -> Response:
        """Remove a meal from the catalog."""
        if not is_valid_id(meal_id):
            return Response.failed(ErrorCode.INVALID_ID, MSG_INVALID_MEAL_ID)
        with self._lock:
            if meal_id not in self._meals:
                return Response.failed(ErrorCode.NOT_FOUND, MSG_MEAL_NOT_FOUND, meal_id=meal_id)
            del self._meals[meal_id]
        logger.debug("Removed meal %s from catalog", meal_id)
        return Response.succeeded()

    def get_offered_meals(self) -> dict[str, Meal]:
        """Return a new mapping of every catalog meal that is offered."""
        with self._lock:
            return {key: meal for key, meal in self._meals.items() if meal.is_offered}

    def get_all_meals(self) -> dict[str, Meal]:
        """Return the live catalog mapping."""
        return self._meals

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def add_meal_to_menu(self, meal_id: str) -> Response:
        """Publish the meal at *meal_id* on the menu.

        The meal must already be present in the menu and be offered; the
        menu entry is then re-set under the same ID.  The catalog is not
        consulted.
        """
        if not is_valid_id(meal_id):
            return Response.failed(ErrorCode.INVALID_ID, MSG_MEAL_WITHOUT_ID)
        with self._lock:
            meal = self._menu.get(meal_id)
            if meal is None:
                return Response.failed(
                    ErrorCode.NOT_FOUND, MSG_MENU_MEAL_NOT_FOUND, meal_id=meal_id
                )
            if not meal.is_offered:
                return Response.failed(
                    ErrorCode.NOT_OFFERED, MSG_MEAL_NOT_OFFERED, meal_id=meal_id
                )
            self._menu[meal_id] = meal
        logger.debug("Published meal %s on menu", meal_id)
        return Response.succeeded()

    def remove_meal_from_menu(self, meal_id: str) -> Response:
        """Remove a meal from the menu."""
        if not is_valid_id(meal_id):
            return Response.failed(ErrorCode.INVALID_ID, MSG_INVALID_MEAL_ID)
        with self._lock:
            if meal_id not in self._menu:
                return Response.failed(ErrorCode.NOT_FOUND, MSG_MEAL_NOT_FOUND, meal_id=meal_id)
            del self._menu[meal_id]
        logger.debug("Removed meal %s from menu", meal_id)
        return Response.succeeded()

    def get_menu(self) -> dict[str, Meal]:
        """Return the live menu mapping."""
        return self._menu
