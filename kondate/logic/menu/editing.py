"""Plan editing: redraw a single day or exchange two days' menus.

Both operations return a new MenuPlan; the input plan and its recipes are left as they were.
"""
import copy
import logging
from datetime import date
from typing import Dict, List, Optional

from kondate.domain.Categories import Cuisine, DishCategory
from kondate.domain.MenuPlan import MenuPlan
from kondate.domain.MenuRequest import MenuRequest
from kondate.domain.Recipe import Recipe
from kondate.logic.menu.planner import MenuPlanner
from kondate.utilities.dates import format_date, parse_date
from kondate.utilities.errors import ValidationError

logger = logging.getLogger(__name__)

__all__ = ["regenerate_day", "swap_days"]


def _ordered(recipes: List[Recipe]) -> List[Recipe]:
    return sorted(recipes, key=lambda r: (r.scheduled_date or date.min, r.category.slot_order))


def _require_in_plan(plan: MenuPlan, day: date):
    if day not in plan.dates():
        raise ValidationError(
            f"{format_date(day)} is outside the plan ({format_date(plan.start_date)}..{format_date(plan.end_date)})")


def regenerate_day(plan: MenuPlan, day, planner: MenuPlanner, request: MenuRequest,
                   cuisine: Optional[Cuisine] = None) -> MenuPlan:
    """Replace every recipe on `day` with a freshly planned day.

    `request` supplies household size, inventory, diet mode and busy dates; its
    date range is ignored. `cuisine` pins the new day's cuisine, otherwise the
    default split decides.
    """
    day = parse_date(day)
    _require_in_plan(plan, day)
    one_day = MenuRequest(
        household_size=request.household_size,
        start_date=day,
        end_date=day,
        inventory=request.inventory,
        diet_mode=request.diet_mode,
        preferences=request.preferences,
        busy_dates=[d for d in request.busy_dates if d == day],
        max_cooking_time=request.max_cooking_time,
        cuisine_distribution={Cuisine.parse(cuisine): 1} if cuisine else None,
    )
    fresh = planner.generate(one_day)
    kept = [r for r in plan.recipes if r.scheduled_date != day]
    logger.info("Regenerated %s: %s", format_date(day), ", ".join(r.name for r in fresh))
    return MenuPlan(recipes=_ordered(kept + fresh), start_date=plan.start_date,
                    end_date=plan.end_date, notes=plan.notes)


def _menu_of(plan: MenuPlan, day: date) -> Dict[DishCategory, Recipe]:
    return plan.by_date().get(day, {})


def _with_contents(target: Recipe, source: Recipe) -> Recipe:
    '''Copy of target (same id, date, weekday) carrying source's dish.'''
    return Recipe(
        name=source.name,
        cooking_time_minutes=source.cooking_time_minutes,
        difficulty=source.difficulty,
        ingredients=copy.deepcopy(source.ingredients),
        category=target.category,
        day=target.day,
        scheduled_date=target.scheduled_date,
        id=target.id,
        cuisine=source.cuisine,
    )


def _moved(source: Recipe, to_day: date) -> Recipe:
    recipe = Recipe(
        name=source.name,
        cooking_time_minutes=source.cooking_time_minutes,
        difficulty=source.difficulty,
        ingredients=copy.deepcopy(source.ingredients),
        category=source.category,
        cuisine=source.cuisine,
    )
    return recipe.schedule(to_day)


def swap_days(plan: MenuPlan, first, second) -> MenuPlan:
    """Exchange the menus of two dates slot by slot.

    Slots filled on both dates keep their recipe ids, dates and weekday labels and
    only trade dishes. A slot filled on one date only moves to the other date.
    """
    a, b = parse_date(first), parse_date(second)
    _require_in_plan(plan, a)
    _require_in_plan(plan, b)
    if a == b:
        return MenuPlan(recipes=plan.recipes, start_date=plan.start_date,
                        end_date=plan.end_date, generated_date=plan.generated_date, notes=plan.notes)

    menus = {a: _menu_of(plan, a), b: _menu_of(plan, b)}
    other = {a: b, b: a}
    result: List[Recipe] = []
    for recipe in plan.recipes:
        day = recipe.scheduled_date
        if day not in menus:
            result.append(recipe)
            continue
        if menus[day].get(recipe.category) is not recipe:
            # second recipe in an already filled slot; by_date() keeps the first
            continue
        counterpart = menus[other[day]].get(recipe.category)
        if counterpart is not None:
            result.append(_with_contents(recipe, counterpart))

    for day in (a, b):
        source_menu = menus[other[day]]
        for category, source in source_menu.items():
            if category not in menus[day]:
                result.append(_moved(source, day))

    return MenuPlan(recipes=_ordered(result), start_date=plan.start_date,
                    end_date=plan.end_date, generated_date=plan.generated_date, notes=plan.notes)
