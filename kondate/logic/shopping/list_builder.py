"""Shopping list builder.

Provides aggregate(menu_plan, inventory, only_missing=False).
Ingredients are grouped by (name, unit) so amounts in different units are never summed.
"""
import unicodedata
from typing import Dict, List, Optional, Tuple
from uuid import NAMESPACE_URL, uuid5

from kondate.domain.Ingredient import Ingredient
from kondate.domain.Inventory import Inventory
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.ShoppingListItem import RecipeBreakdown, ShoppingListItem

_KATAKANA_START = ord('ァ')
_KATAKANA_END = ord('ヶ')
_KANA_OFFSET = ord('ァ') - ord('ぁ')


def _to_hiragana(text: str) -> str:
    return ''.join(
        chr(ord(ch) - _KANA_OFFSET) if _KATAKANA_START <= ord(ch) <= _KATAKANA_END else ch
        for ch in text
    )


def collation_key(name: str) -> Tuple[str, str]:
    """Japanese-aware name ordering: width-folded, katakana read as hiragana, case-insensitive.

    The original name breaks ties so the order is total.
    """
    folded = _to_hiragana(unicodedata.normalize('NFKC', name or '')).casefold()
    return folded, name or ''


def _stable_id(name: str, unit: str) -> str:
    return f"shop-{uuid5(NAMESPACE_URL, f'{name}|{unit}').hex[:12]}"


def aggregate(menu_plan: Optional[MenuPlan], inventory=None, *, only_missing: bool = False) -> List[ShoppingListItem]:
    """Compute the shopping list for a plan.

    Args:
        menu_plan: the finalized plan; None or an empty plan gives an empty list.
        inventory: Inventory or list of InventoryItem; read only.
        only_missing: drop entries whose shortage is 0.

    Returns:
        One ShoppingListItem per distinct (name, unit), sorted by ingredient
        category (野菜, 肉・魚, 調味料, その他) then by name.
    """
    if not menu_plan or not menu_plan.recipes:
        return []
    stock = Inventory.of(inventory)

    grouped: Dict[Tuple[str, str], ShoppingListItem] = {}
    for recipe in menu_plan.recipes:
        for ing in recipe.ingredients:
            entry = grouped.get(ing.key)
            if entry is None:
                record = Ingredient(name=ing.name, amount=0, unit=ing.unit,
                                    category=ing.category, id=_stable_id(ing.name, ing.unit))
                entry = ShoppingListItem(ingredient=record, needed=0)
                grouped[ing.key] = entry
            entry.needed += ing.amount
            entry.ingredient.amount = entry.needed
            entry.breakdown.append(RecipeBreakdown(recipe_name=recipe.name, day=recipe.day, amount=ing.amount))

    items: List[ShoppingListItem] = []
    for (name, unit), entry in grouped.items():
        match = stock.find(name, unit)
        entry.in_stock = max(0, match.amount) if match is not None else 0
        if only_missing and entry.shortage <= 0:
            continue
        items.append(entry)

    items.sort(key=lambda it: (it.ingredient.category.sort_index, collation_key(it.name), it.unit))
    return items


__all__ = ['aggregate', 'collation_key']
