"""Cuisine distribution: how many of the n days get each cuisine, and in what order."""
import math
from fractions import Fraction
from typing import Dict, List, Optional

from kondate.domain.Categories import Cuisine
from kondate.utilities.constants import DEFAULT_CUISINE_SHARES
from kondate.utilities.random_source import RandomSource, shuffle

__all__ = ["default_distribution", "assign_genres"]


def _share(key: str) -> Fraction:
    # Exact decimal share, so 10 * 0.3 is 3 and not 3.0000000000000004
    return Fraction(str(DEFAULT_CUISINE_SHARES[key]))


def default_distribution(days: int) -> Dict[Cuisine, int]:
    """ceil(.4n) japanese, ceil(.3n) western, floor(.3n) chinese.

    The ceilings can overshoot n by one or two days; assign_genres truncates
    after shuffling so the overshoot lands on a random cuisine.
    """
    return {
        Cuisine.JAPANESE: math.ceil(days * _share("japanese")),
        Cuisine.WESTERN: math.ceil(days * _share("western")),
        Cuisine.CHINESE: math.floor(days * _share("chinese")),
    }


def assign_genres(days: int, rng: RandomSource,
                  distribution: Optional[Dict[Cuisine, int]] = None) -> List[Cuisine]:
    """Return one cuisine per day (index 0 = first day), uniformly shuffled."""
    counts = distribution if distribution is not None else default_distribution(days)
    genres: List[Cuisine] = []
    for cuisine in Cuisine:
        genres.extend([cuisine] * counts.get(cuisine, 0))
    return shuffle(rng, genres)[:days]
