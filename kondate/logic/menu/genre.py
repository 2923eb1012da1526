"""Genre label heuristic: infer a dish's cuisine from keywords in its name."""
from kondate.domain.Categories import Cuisine
from kondate.utilities.constants import GENRE_KEYWORDS

__all__ = ["genre_label"]


def genre_label(name: str) -> Cuisine:
    """First cuisine whose keyword list matches wins; unrecognised names count as Japanese."""
    for cuisine_key, keywords in GENRE_KEYWORDS.items():
        if any(k in name for k in keywords):
            return Cuisine(cuisine_key)
    return Cuisine.JAPANESE
