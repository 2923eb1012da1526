"""Inventory aggregate: the caller's stock snapshot.

The engine never mutates a caller's Inventory. Planning works on
working_copy(); ledger operations return a new Inventory.
"""
from datetime import date
from typing import Iterable, Iterator, List, Optional, Union

from kondate.domain.Categories import IngredientCategory
from kondate.domain.InventoryItem import InventoryItem


class Inventory:
    def __init__(self, items: Optional[Iterable[InventoryItem]] = None):
        self.items: List[InventoryItem] = list(items) if items else []

    @classmethod
    def of(cls, source: Union["Inventory", Iterable[InventoryItem], None]) -> "Inventory":
        '''Wraps a plain list (or None) so every entry point accepts both shapes.'''
        if isinstance(source, Inventory):
            return source
        return cls(source or [])

    def find(self, name: str, unit: str, *, category: Optional[IngredientCategory] = None,
             usable_on: Optional[date] = None) -> Optional[InventoryItem]:
        '''
        Returns the first item matching name and unit exactly.
        category: also require the category to match.
        usable_on: also require the item not to be expired on that day.
        '''
        for item in self.items:
            if item.name != name or item.unit != unit:
                continue
            if category is not None and item.category != category:
                continue
            if usable_on is not None and not item.is_usable_on(usable_on):
                continue
            return item
        return None

    def add_item(self, item: InventoryItem):
        self.items.append(item)

    def remove_item(self, item: InventoryItem):
        self.items.remove(item)

    def working_copy(self) -> "Inventory":
        '''Item-level copy: amounts can be decremented without touching the original.'''
        return Inventory(item.copy() for item in self.items)

    def get_items(self) -> List[InventoryItem]:
        return self.items

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        '''Builds an Inventory from a list of dictionaries.'''
        return Inventory(InventoryItem.from_dict(d) for d in (data or []))

    def to_dict(self):
        return [item.to_dict() for item in self.items]
