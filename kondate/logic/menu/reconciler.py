"""Inventory reconciler.

Scales a catalog template to the household and links each ingredient to an
on-hand inventory lot when one can cover it. Works on the planner's private
working copy of the inventory; the caller's snapshot is never touched.
"""
import logging
import math
from datetime import date
from typing import List, Tuple

from kondate.domain.Ingredient import Ingredient
from kondate.domain.Inventory import Inventory
from kondate.domain.Recipe import Recipe
from kondate.domain.RecipeTemplate import RecipeTemplate
from kondate.utilities.constants import REFERENCE_HOUSEHOLD_SIZE

logger = logging.getLogger(__name__)

__all__ = ["scale_quantity", "apply_inventory"]


def scale_quantity(base_qty: float, household_size: int) -> int:
    """Base quantities are for REFERENCE_HOUSEHOLD_SIZE people; round up so nobody goes short."""
    return math.ceil(base_qty * household_size / REFERENCE_HOUSEHOLD_SIZE)


def apply_inventory(template: RecipeTemplate, working_inventory: Inventory,
                    household_size: int, today: date) -> Tuple[Recipe, List[str]]:
    """Instantiate `template` for the household, reserving stock from `working_inventory`.

    Returns the new (unscheduled) recipe and the names of ingredients that were
    covered by inventory, each listed once. A lot is used only when it is
    unexpired on `today` and holds at least the scaled amount; partial cover
    leaves the ingredient unlinked.
    """
    consumed: List[str] = []
    ingredients: List[Ingredient] = []
    for ti in template.ingredients:
        needed = scale_quantity(ti.base_qty, household_size)
        ingredient = Ingredient(name=ti.name, amount=needed, unit=ti.unit, category=ti.category)
        item = working_inventory.find(ti.name, ti.unit, usable_on=today)
        if item is not None and item.amount >= needed:
            ingredient.inventory_id = item.id
            item.set_amount(-needed)
            if ti.name not in consumed:
                consumed.append(ti.name)
            logger.debug("Reserved %s %s %s from inventory %s", needed, ti.unit, ti.name, item.id)
        ingredients.append(ingredient)

    recipe = Recipe(
        name=template.name,
        cooking_time_minutes=template.base_time_minutes,
        difficulty=template.difficulty,
        ingredients=ingredients,
        category=template.category,
        cuisine=template.cuisine,
    )
    return recipe, consumed
