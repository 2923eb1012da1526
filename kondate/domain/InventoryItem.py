"""InventoryItem: an on-hand stock lot with expiration tracking (owned by the caller)."""
import copy
from datetime import date
from typing import Optional
from uuid import uuid4

from kondate.domain.Categories import IngredientCategory
from kondate.utilities.dates import format_date, parse_date


class InventoryItem:
    def __init__(self, name: str = "", amount: float = 0, unit: str = "",
                 category: IngredientCategory = IngredientCategory.OTHER,
                 expiration_date: Optional[date] = None, added_date: Optional[date] = None,
                 id: Optional[str] = None):
        self.id = id or str(uuid4())
        self.name = name
        self.amount = amount
        self.unit = unit
        self.category = IngredientCategory.parse(category)
        self.expiration_date = expiration_date
        self.added_date = added_date or date.today()

    @property
    def key(self):
        return (self.name, self.unit)

    def is_usable_on(self, today: date) -> bool:
        '''Only stock expiring strictly after today may be planned into recipes.'''
        return self.expiration_date is not None and self.expiration_date > today

    def days_until_expiry(self, today: date) -> Optional[int]:
        if self.expiration_date is None:
            return None
        return (self.expiration_date - today).days

    def set_amount(self, delta: float):
        '''Adjusts the amount by the specified delta (can be negative).'''
        self.amount += delta

    def copy(self) -> "InventoryItem":
        return copy.copy(self)

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.amount} {self.unit}"]
        if self.expiration_date:
            parts.append(f"Exp: {format_date(self.expiration_date)}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an InventoryItem from a dict. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return InventoryItem(
            name=d.get("name", ""),
            amount=d.get("amount", d.get("qty", 0)) or 0,
            unit=d.get("unit", ""),
            category=d.get("category"),
            expiration_date=parse_date(d.get("expiration_date", d.get("expires_at"))),
            added_date=parse_date(d.get("added_date")),
            id=d.get("id", d.get("invId")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category.value,
            "expiration_date": format_date(self.expiration_date),
            "added_date": format_date(self.added_date),
        }
