"""MenuRequest: everything the planner (or the remote generator) needs for one generation run."""
from datetime import date
from typing import Dict, Iterable, List, Optional

from kondate.domain.Categories import Cuisine
from kondate.domain.Inventory import Inventory
from kondate.utilities.dates import date_range, inclusive_days, parse_date
from kondate.utilities.errors import ValidationError


class MenuRequest:
    def __init__(self, household_size: int, start_date: date, end_date: date,
                 inventory: Optional[Inventory] = None, diet_mode: bool = False,
                 preferences: str = "", busy_dates: Optional[Iterable[date]] = None,
                 max_cooking_time: Optional[int] = None,
                 cuisine_distribution: Optional[Dict[Cuisine, int]] = None,
                 must_use_ingredients: Optional[List[str]] = None):
        self.household_size = household_size
        self.start_date = start_date
        self.end_date = end_date
        self.inventory = Inventory.of(inventory)
        self.diet_mode = diet_mode
        self.preferences = preferences or ""
        try:
            self.busy_dates = {parse_date(d) for d in (busy_dates or [])}
        except ValueError as e:
            raise ValidationError(f"Invalid busy date: {e}") from e
        # Busy-day ceiling override; None keeps the configured busy-day limit
        self.max_cooking_time = max_cooking_time
        self.cuisine_distribution: Optional[Dict[Cuisine, int]] = None
        if cuisine_distribution is not None:
            try:
                self.cuisine_distribution = {Cuisine.parse(k): v for k, v in cuisine_distribution.items()}
            except ValueError as e:
                raise ValidationError(str(e)) from e
        self.must_use_ingredients = list(must_use_ingredients or [])

    @property
    def day_count(self) -> int:
        return inclusive_days(self.start_date, self.end_date)

    def dates(self) -> List[date]:
        return date_range(self.start_date, self.end_date)

    def is_busy(self, day: date) -> bool:
        return day in self.busy_dates

    def validate(self) -> "MenuRequest":
        '''Raises ValidationError before any generation work starts.'''
        if isinstance(self.household_size, bool) or not isinstance(self.household_size, int):
            raise ValidationError(f"Household size must be an integer: {self.household_size!r}")
        if self.household_size <= 0:
            raise ValidationError(f"Household size must be positive: {self.household_size}")
        if not isinstance(self.start_date, date) or not isinstance(self.end_date, date):
            raise ValidationError("Start and end dates are required")
        if self.end_date < self.start_date:
            raise ValidationError(
                f"End date {self.end_date.isoformat()} is before start date {self.start_date.isoformat()}")
        if self.max_cooking_time is not None and self.max_cooking_time <= 0:
            raise ValidationError(f"Max cooking time must be positive: {self.max_cooking_time}")
        if self.cuisine_distribution is not None:
            for cuisine, count in self.cuisine_distribution.items():
                if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                    raise ValidationError(f"Day count for {cuisine.value} must be a non-negative integer: {count!r}")
            total = sum(self.cuisine_distribution.values())
            if total != self.day_count:
                raise ValidationError(
                    f"Cuisine distribution covers {total} days but the range has {self.day_count}")
        return self

    def __str__(self) -> str:
        return (f"MenuRequest {self.start_date}..{self.end_date} for {self.household_size} "
                f"(diet={self.diet_mode}, busy={len(self.busy_dates)})")

    __repr__ = __str__
