"""Closed vocabularies used across the engine: cuisine, dish slot, ingredient category."""
from enum import Enum


class Cuisine(str, Enum):
    JAPANESE = "japanese"
    WESTERN = "western"
    CHINESE = "chinese"

    @property
    def label(self) -> str:
        '''Japanese genre label used on the remote wire format.'''
        return _CUISINE_LABELS[self]

    @classmethod
    def parse(cls, value) -> "Cuisine":
        '''Accept an enum member, an English key ("western") or a label ("洋食").'''
        if isinstance(value, Cuisine):
            return value
        text = str(value or "").strip()
        for member in cls:
            if text.lower() == member.value or text == member.label:
                return member
        raise ValueError(f"Unknown cuisine: {value!r}")


_CUISINE_LABELS = {
    Cuisine.JAPANESE: "和食",
    Cuisine.WESTERN: "洋食",
    Cuisine.CHINESE: "中華",
}


class DishCategory(str, Enum):
    MAIN = "main"
    SIDE = "side"
    SOUP = "soup"

    @property
    def slot_order(self) -> int:
        return _SLOT_ORDER[self]


_SLOT_ORDER = {DishCategory.MAIN: 0, DishCategory.SIDE: 1, DishCategory.SOUP: 2}


class IngredientCategory(str, Enum):
    VEGETABLE = "野菜"
    MEAT_FISH = "肉・魚"
    SEASONING = "調味料"
    OTHER = "その他"

    @property
    def sort_index(self) -> int:
        return _INGREDIENT_ORDER[self]

    @classmethod
    def parse(cls, value) -> "IngredientCategory":
        '''Unknown or missing categories fall into OTHER.'''
        if isinstance(value, IngredientCategory):
            return value
        text = str(value or "").strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        return cls.OTHER


_INGREDIENT_ORDER = {
    IngredientCategory.VEGETABLE: 0,
    IngredientCategory.MEAT_FISH: 1,
    IngredientCategory.SEASONING: 2,
    IngredientCategory.OTHER: 3,
}


class PriorityHint(str, Enum):
    NEAR_EXPIRY = "near_expiry"
    OVERSTOCK = "overstock"
    NORMAL = "normal"


__all__ = ["Cuisine", "DishCategory", "IngredientCategory", "PriorityHint"]
