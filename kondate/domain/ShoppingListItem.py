"""Shopping list entries: one per distinct ingredient, with per-recipe attribution."""
from typing import List, Optional

from kondate.domain.Ingredient import Ingredient


class RecipeBreakdown:
    def __init__(self, recipe_name: str, day: str, amount: float):
        self.recipe_name = recipe_name
        self.day = day
        self.amount = amount

    def __eq__(self, other) -> bool:
        if not isinstance(other, RecipeBreakdown):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{self.day} {self.recipe_name}: {self.amount}"

    def to_dict(self):
        return {"recipe_name": self.recipe_name, "day": self.day, "amount": self.amount}


class ShoppingListItem:
    def __init__(self, ingredient: Ingredient, needed: float, in_stock: float = 0,
                 is_checked: bool = False, breakdown: Optional[List[RecipeBreakdown]] = None):
        self.ingredient = ingredient
        self.needed = needed
        self.in_stock = in_stock
        self.is_checked = is_checked
        self.breakdown = breakdown[:] if breakdown else []

    @property
    def shortage(self) -> float:
        '''Amount still to buy; never negative.'''
        return max(0, self.needed - self.in_stock)

    @property
    def name(self) -> str:
        return self.ingredient.name

    @property
    def unit(self) -> str:
        return self.ingredient.unit

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.to_dict(include_ids=False) == other.to_dict(include_ids=False)

    def __str__(self) -> str:
        return f"{self.name} - need {self.needed} {self.unit}, have {self.in_stock}, buy {self.shortage}"

    __repr__ = __str__

    def to_dict(self, include_ids: bool = True):
        ingredient = self.ingredient.to_dict()
        if not include_ids:
            ingredient.pop("id", None)
        return {
            "ingredient": ingredient,
            "needed": self.needed,
            "in_stock": self.in_stock,
            "shortage": self.shortage,
            "is_checked": self.is_checked,
            "breakdown": [b.to_dict() for b in self.breakdown],
        }
