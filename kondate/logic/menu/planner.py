"""Local menu planner.

One main dish per day (always), then an optional side and soup drawn under
the day's remaining cooking-time budget. Cuisines are assigned per day from
the requested distribution (or the default split) in shuffled order.

Empty main-dish pools are handled in one of two ways, chosen by
PlannerSettings.strict_constraints:
- relaxed (default): drop the time limit, then the diet filter, and log a warning
- strict: raise NoCandidateError for the day
A cuisine with no main dishes at all raises NoCandidateError in both modes.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from kondate.domain.Categories import Cuisine, DishCategory
from kondate.domain.Inventory import Inventory
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.MenuRequest import MenuRequest
from kondate.domain.Recipe import Recipe
from kondate.domain.RecipeTemplate import RecipeTemplate
from kondate.infra.Recipe_Catalog import RecipeCatalog, default_catalog
from kondate.logic.menu.distribution import assign_genres
from kondate.logic.menu.filters import filter_by_diet_mode, filter_by_time_limit
from kondate.logic.menu.reconciler import apply_inventory
from kondate.utilities import config
from kondate.utilities.constants import INVENTORY_NOTE_PREFIX
from kondate.utilities.dates import format_date
from kondate.utilities.errors import NoCandidateError, ValidationError
from kondate.utilities.random_source import PythonRandomSource, RandomSource, choose

logger = logging.getLogger(__name__)

__all__ = ["PlannerSettings", "MenuPlanner"]


@dataclass
class PlannerSettings:
    side_probability: float = config.SIDE_DISH_PROBABILITY
    soup_probability: float = config.SOUP_PROBABILITY
    daily_time_limit: int = config.DAILY_TIME_LIMIT_MIN
    busy_day_time_limit: int = config.BUSY_DAY_TIME_LIMIT_MIN
    strict_constraints: bool = config.STRICT_CONSTRAINTS

    def __post_init__(self):
        for name in ("side_probability", "soup_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValidationError(f"{name} must be within [0, 1]: {value}")
        if self.daily_time_limit <= 0 or self.busy_day_time_limit <= 0:
            raise ValidationError("Time limits must be positive")

    def time_limit_for(self, request: MenuRequest, day: date) -> int:
        '''Busy days use the request's max cooking time if given, else the busy-day limit.'''
        if request.is_busy(day):
            return request.max_cooking_time or self.busy_day_time_limit
        return self.daily_time_limit


class MenuPlanner:
    def __init__(self, catalog: Optional[RecipeCatalog] = None, settings: Optional[PlannerSettings] = None,
                 rng: Optional[RandomSource] = None, today: Optional[date] = None):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.settings = settings or PlannerSettings()
        self.rng = rng or PythonRandomSource()
        # Fixed "today" for expiry checks; None means the real current date on each call
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    def generate(self, request: MenuRequest) -> List[Recipe]:
        """Return the scheduled recipes for every day of the request, day by day, main/side/soup."""
        recipes, _ = self._run(request)
        return recipes

    def plan(self, request: MenuRequest) -> MenuPlan:
        """Like generate(), wrapped in a MenuPlan with an inventory-usage note when stock was used."""
        recipes, consumed = self._run(request)
        notes = []
        if consumed:
            notes.append(INVENTORY_NOTE_PREFIX + ", ".join(consumed))
        return MenuPlan(recipes=recipes, start_date=request.start_date,
                        end_date=request.end_date, notes=notes)

    def _run(self, request: MenuRequest) -> Tuple[List[Recipe], List[str]]:
        request.validate()
        today = self.today
        working = request.inventory.working_copy()
        genres = assign_genres(request.day_count, self.rng, request.cuisine_distribution)
        logger.info("Planning %d days from %s for %d people",
                    request.day_count, format_date(request.start_date), request.household_size)

        recipes: List[Recipe] = []
        consumed: List[str] = []
        for day, cuisine in zip(request.dates(), genres):
            for recipe, names in self._plan_day(request, day, cuisine, working, today):
                recipes.append(recipe.schedule(day))
                for name in names:
                    if name not in consumed:
                        consumed.append(name)
        return recipes, consumed

    def _plan_day(self, request: MenuRequest, day: date, cuisine: Cuisine,
                  working: Inventory, today: date) -> List[Tuple[Recipe, List[str]]]:
        budget = self.settings.time_limit_for(request, day)
        size = request.household_size

        main_template = self._pick_main(request, day, cuisine, budget)
        main, names = apply_inventory(main_template, working, size, today)
        produced = [(main, names)]
        remaining = budget - main.cooking_time_minutes

        if self.rng.next() < self.settings.side_probability:
            side_template = self._pick_optional(DishCategory.SIDE, cuisine, request.diet_mode, remaining)
            if side_template is not None:
                side, names = apply_inventory(side_template, working, size, today)
                produced.append((side, names))
                remaining -= side.cooking_time_minutes

        if self.rng.next() < self.settings.soup_probability:
            soup_template = self._pick_optional(DishCategory.SOUP, cuisine, request.diet_mode, remaining)
            if soup_template is not None:
                soup, names = apply_inventory(soup_template, working, size, today)
                produced.append((soup, names))

        return produced

    def _pick_main(self, request: MenuRequest, day: date, cuisine: Cuisine, budget: int) -> RecipeTemplate:
        pool = self.catalog.pool(DishCategory.MAIN, cuisine)
        if not pool:
            raise NoCandidateError(f"No {cuisine.value} main dishes in the catalog",
                                   scheduled_date=day, cuisine=cuisine)

        diet_ok = filter_by_diet_mode(pool, request.diet_mode)
        candidates = filter_by_time_limit(diet_ok, budget)
        if candidates:
            return choose(self.rng, candidates)

        if self.settings.strict_constraints:
            raise NoCandidateError(
                f"No {cuisine.value} main dish within {budget} min (diet={request.diet_mode}) "
                f"on {format_date(day)}", scheduled_date=day, cuisine=cuisine)

        if diet_ok:
            logger.warning("No %s main dish fits %d min on %s; ignoring the time limit",
                           cuisine.value, budget, format_date(day))
            return choose(self.rng, diet_ok)
        logger.warning("No %s main dish passes the diet filter on %s; ignoring diet mode",
                       cuisine.value, format_date(day))
        return choose(self.rng, pool)

    def _pick_optional(self, category: DishCategory, cuisine: Cuisine, diet_mode: bool,
                       remaining: int) -> Optional[RecipeTemplate]:
        pool = filter_by_diet_mode(self.catalog.pool(category, cuisine), diet_mode)
        pool = filter_by_time_limit(pool, remaining)
        if not pool:
            logger.debug("No %s %s fits the remaining %d min", cuisine.value, category.value, remaining)
            return None
        return choose(self.rng, pool)
