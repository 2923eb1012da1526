"""Inventory bookkeeping after the plan meets reality.

consume_cooked: subtract a cooked day's ingredients.
apply_purchases: add bought items (new lots get a default shelf life).
Both return a new Inventory and leave the given one untouched.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional

from kondate.domain.Ingredient import Ingredient
from kondate.domain.Inventory import Inventory
from kondate.domain.InventoryItem import InventoryItem
from kondate.domain.Recipe import Recipe
from kondate.domain.ShoppingListItem import ShoppingListItem
from kondate.utilities import config

logger = logging.getLogger(__name__)

__all__ = ["consume_cooked", "apply_purchases", "purchases_from_shopping_list"]


def consume_cooked(inventory, recipes: Iterable[Recipe]) -> Inventory:
    """Subtract every ingredient of the cooked recipes from the lot matching name, unit and category.

    Amounts are clamped at 0 and emptied lots are removed. Ingredients with no
    matching lot are ignored.
    """
    result = Inventory.of(inventory).working_copy()
    for recipe in recipes:
        for ing in recipe.ingredients:
            item = result.find(ing.name, ing.unit, category=ing.category)
            if item is None:
                continue
            remaining = max(0, item.amount - ing.amount)
            if remaining == 0:
                result.remove_item(item)
                logger.debug("Used up %s (%s)", item.name, item.id)
            else:
                item.amount = remaining
    return result


def apply_purchases(inventory, purchases: Iterable[Ingredient], today: Optional[date] = None,
                    shelf_life_days: int = config.PURCHASE_SHELF_LIFE_DAYS) -> Inventory:
    """Add purchased amounts: top up the lot matching name, unit and category, or open a new one."""
    today = today or date.today()
    result = Inventory.of(inventory).working_copy()
    for bought in purchases:
        if bought.amount <= 0:
            continue
        item = result.find(bought.name, bought.unit, category=bought.category)
        if item is not None:
            item.set_amount(bought.amount)
            continue
        result.add_item(InventoryItem(
            name=bought.name,
            amount=bought.amount,
            unit=bought.unit,
            category=bought.category,
            expiration_date=today + timedelta(days=shelf_life_days),
            added_date=today,
        ))
        logger.debug("New inventory lot for %s", bought.name)
    return result


def purchases_from_shopping_list(items: Iterable[ShoppingListItem], *, checked_only: bool = True) -> List[Ingredient]:
    """Turn shopping list entries into purchases of their shortage amount."""
    purchases: List[Ingredient] = []
    for it in items:
        if checked_only and not it.is_checked:
            continue
        if it.shortage <= 0:
            continue
        purchases.append(Ingredient(name=it.name, amount=it.shortage, unit=it.unit,
                                    category=it.ingredient.category))
    return purchases
