"""Ingredient attached to a scheduled recipe: name, amount, unit, category, optional inventory link."""
from typing import Optional
from uuid import uuid4

from kondate.domain.Categories import IngredientCategory


class Ingredient:
    def __init__(self, name: str = "", amount: float = 0, unit: str = "",
                 category: IngredientCategory = IngredientCategory.OTHER,
                 id: Optional[str] = None, inventory_id: Optional[str] = None):
        self.id = id or f"ing-{uuid4().hex[:12]}"
        self.name = name
        self.amount = amount
        self.unit = unit
        self.category = IngredientCategory.parse(category)
        # Set when the amount is covered by an inventory item
        self.inventory_id = inventory_id

    @property
    def key(self):
        '''Matching key against inventory and pantry staples.'''
        return (self.name, self.unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.amount} {self.unit}", self.category.value]
        if self.inventory_id:
            parts.append(f"inv: {self.inventory_id}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dict. Accepts the remote "qty"/"invId" spellings.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=d.get("name", ""),
            amount=d.get("amount", d.get("qty", 0)),
            unit=d.get("unit", ""),
            category=d.get("category"),
            id=d.get("id"),
            inventory_id=d.get("inventory_id", d.get("invId")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category.value,
            "inventory_id": self.inventory_id,
        }
