"""MenuPlan: the recipes scheduled over a contiguous date range."""
from datetime import date, datetime
from typing import Dict, List, Optional

from kondate.domain.Categories import DishCategory
from kondate.domain.Recipe import Recipe
from kondate.utilities.dates import date_range, format_date, parse_date


class MenuPlan:
    def __init__(self, recipes: Optional[List[Recipe]] = None, start_date: Optional[date] = None,
                 end_date: Optional[date] = None, generated_date: Optional[datetime] = None,
                 notes: Optional[List[str]] = None):
        self.recipes = recipes[:] if recipes else []
        self.start_date = start_date
        self.end_date = end_date
        self.generated_date = generated_date or datetime.now()
        self.notes = notes[:] if notes else []

    def dates(self) -> List[date]:
        if not self.start_date or not self.end_date:
            return []
        return date_range(self.start_date, self.end_date)

    def by_date(self) -> Dict[date, Dict[DishCategory, Recipe]]:
        '''date -> {main/side/soup -> recipe}; first recipe per slot wins.'''
        result: Dict[date, Dict[DishCategory, Recipe]] = {}
        for recipe in self.recipes:
            slots = result.setdefault(recipe.scheduled_date, {})
            slots.setdefault(recipe.category, recipe)
        return result

    def out_of_range(self) -> List[Recipe]:
        '''Recipes dated outside [start_date, end_date]; empty for a well-formed plan.'''
        if not self.start_date or not self.end_date:
            return []
        return [r for r in self.recipes
                if r.scheduled_date is None or not self.start_date <= r.scheduled_date <= self.end_date]

    def __str__(self) -> str:
        lines = "\n\t".join(str(r) for r in self.recipes)
        return f"MenuPlan {format_date(self.start_date)}..{format_date(self.end_date)}:\n\t{lines}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        generated = d.get("generated_date")
        if isinstance(generated, str) and generated:
            generated = datetime.fromisoformat(generated.replace("Z", "+00:00"))
        return MenuPlan(
            recipes=[Recipe.from_dict(r) for r in d.get("recipes", [])],
            start_date=parse_date(d.get("start_date")),
            end_date=parse_date(d.get("end_date")),
            generated_date=generated or None,
            notes=d.get("notes", []),
        )

    def to_dict(self):
        return {
            "recipes": [r.to_dict() for r in self.recipes],
            "generated_date": self.generated_date.isoformat() if self.generated_date else "",
            "start_date": format_date(self.start_date),
            "end_date": format_date(self.end_date),
            "notes": self.notes,
        }
