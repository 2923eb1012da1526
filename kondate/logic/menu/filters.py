"""Candidate filters applied to a catalog pool before a dish is drawn."""
from typing import List, Optional, Sequence

from kondate.domain.RecipeTemplate import RecipeTemplate
from kondate.utilities.constants import FRIED_DISH_MARKERS

__all__ = ["is_fried", "filter_by_diet_mode", "filter_by_time_limit"]


def is_fried(name: str) -> bool:
    return any(marker in name for marker in FRIED_DISH_MARKERS)


def filter_by_diet_mode(candidates: Sequence[RecipeTemplate], diet_mode_on: bool) -> List[RecipeTemplate]:
    """Drop fried dishes when diet mode is on; otherwise return the pool unchanged."""
    if not diet_mode_on:
        return list(candidates)
    return [c for c in candidates if not is_fried(c.name)]


def filter_by_time_limit(candidates: Sequence[RecipeTemplate], max_minutes: Optional[int]) -> List[RecipeTemplate]:
    """Keep dishes whose base cooking time fits the budget (inclusive). None disables the filter."""
    if max_minutes is None:
        return list(candidates)
    return [c for c in candidates if c.base_time_minutes <= max_minutes]
