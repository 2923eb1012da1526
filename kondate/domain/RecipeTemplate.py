"""Catalog entry: a dish with base quantities for the reference household size."""
from dataclasses import dataclass
from typing import Tuple

from kondate.domain.Categories import Cuisine, DishCategory, IngredientCategory


@dataclass(frozen=True)
class TemplateIngredient:
    name: str
    base_qty: float
    unit: str
    category: IngredientCategory = IngredientCategory.OTHER

    def __post_init__(self):
        if self.base_qty <= 0:
            raise ValueError(f"Base quantity must be positive for '{self.name}': {self.base_qty}")
        object.__setattr__(self, "category", IngredientCategory.parse(self.category))

    @staticmethod
    def from_dict(data):
        return TemplateIngredient(
            name=data["name"],
            base_qty=data.get("base_qty", data.get("qty")),
            unit=data.get("unit", ""),
            category=data.get("category"),
        )

    def to_dict(self):
        return {"name": self.name, "base_qty": self.base_qty, "unit": self.unit,
                "category": self.category.value}


@dataclass(frozen=True)
class RecipeTemplate:
    """Read-only; the catalog hands the same instances to every planner run."""
    name: str
    base_time_minutes: int
    difficulty: int
    cuisine: Cuisine
    category: DishCategory
    ingredients: Tuple[TemplateIngredient, ...] = ()

    def __post_init__(self):
        if not 1 <= int(self.difficulty) <= 5:
            raise ValueError(f"Difficulty must be between 1 and 5 for '{self.name}': {self.difficulty}")
        object.__setattr__(self, "cuisine", Cuisine.parse(self.cuisine))
        object.__setattr__(self, "category", DishCategory(self.category))
        object.__setattr__(self, "ingredients", tuple(self.ingredients))

    def __str__(self) -> str:
        return (f"{self.name} [{self.cuisine.value}/{self.category.value}] - "
                f"{self.base_time_minutes} min - difficulty {self.difficulty}")

    @staticmethod
    def from_dict(data, cuisine=None, category=None):
        '''Builds a template; cuisine/category may come from the enclosing catalog section.'''
        return RecipeTemplate(
            name=data["name"],
            base_time_minutes=int(data.get("base_time_minutes", data.get("time", 0))),
            difficulty=int(data.get("difficulty", 1)),
            cuisine=data.get("cuisine", cuisine),
            category=data.get("category", category),
            ingredients=tuple(TemplateIngredient.from_dict(i) for i in data.get("ingredients", [])),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "base_time_minutes": self.base_time_minutes,
            "difficulty": self.difficulty,
            "cuisine": self.cuisine.value,
            "category": self.category.value,
            "ingredients": [i.to_dict() for i in self.ingredients],
        }
