"""Scheduled recipe instance: a catalog dish scaled for a household and placed on a date."""
from datetime import date
from typing import List, Optional
from uuid import uuid4

from kondate.domain.Categories import Cuisine, DishCategory
from kondate.domain.Ingredient import Ingredient
from kondate.utilities.dates import format_date, parse_date, weekday_label


class Recipe:
    def __init__(self, name: str = "", cooking_time_minutes: int = 0, difficulty: int = 1,
                 ingredients: Optional[List[Ingredient]] = None,
                 category: DishCategory = DishCategory.MAIN,
                 day: str = "", scheduled_date: Optional[date] = None,
                 id: Optional[str] = None, cuisine: Optional[Cuisine] = None):
        self.id = id or f"recipe-{uuid4().hex}"
        self.name = name
        self.cooking_time_minutes = cooking_time_minutes
        self.difficulty = difficulty
        self.ingredients = ingredients[:] if ingredients else []
        self.category = DishCategory(category)
        self.day = day
        self.scheduled_date = scheduled_date
        self.cuisine = Cuisine.parse(cuisine) if cuisine else None

    def schedule(self, on: date) -> "Recipe":
        '''Places the recipe on a date; the weekday label is derived from it.'''
        self.scheduled_date = on
        self.day = weekday_label(on)
        return self

    def uses_inventory(self) -> bool:
        return any(i.inventory_id for i in self.ingredients)

    def __str__(self) -> str:
        when = format_date(self.scheduled_date)
        return f"{when} {self.day} [{self.category.value}] {self.name} - {self.cooking_time_minutes} min"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        cuisine = d.get("cuisine")
        return Recipe(
            name=d.get("name", ""),
            cooking_time_minutes=d.get("cooking_time_minutes", d.get("time", 0)),
            difficulty=d.get("difficulty", 1),
            ingredients=[Ingredient.from_dict(i) for i in d.get("ingredients", [])],
            category=d.get("category", DishCategory.MAIN),
            day=d.get("day", ""),
            scheduled_date=parse_date(d.get("scheduled_date")),
            id=d.get("id"),
            cuisine=Cuisine.parse(cuisine) if cuisine else None,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "cooking_time_minutes": self.cooking_time_minutes,
            "difficulty": self.difficulty,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "category": self.category.value,
            "cuisine": self.cuisine.value if self.cuisine else None,
            "day": self.day,
            "scheduled_date": format_date(self.scheduled_date),
        }
