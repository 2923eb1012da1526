import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from kondate.domain.Categories import Cuisine, DishCategory
from kondate.domain.RecipeTemplate import RecipeTemplate
from kondate.infra.paths import CATALOG_FILE

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Immutable set of dish templates, indexed by (dish category, cuisine)."""

    def __init__(self, templates: Iterable[RecipeTemplate]):
        self._templates: Tuple[RecipeTemplate, ...] = tuple(templates)
        index: Dict[Tuple[DishCategory, Cuisine], List[RecipeTemplate]] = {}
        for t in self._templates:
            index.setdefault((t.category, t.cuisine), []).append(t)
        self._index = {k: tuple(v) for k, v in index.items()}

    @property
    def templates(self) -> Tuple[RecipeTemplate, ...]:
        return self._templates

    def pool(self, category: DishCategory, cuisine: Cuisine) -> List[RecipeTemplate]:
        '''Candidates for one slot; a fresh list so callers can filter it freely.'''
        return list(self._index.get((DishCategory(category), Cuisine.parse(cuisine)), ()))

    def find(self, name: str) -> Optional[RecipeTemplate]:
        for t in self._templates:
            if t.name == name:
                return t
        return None

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self):
        return iter(self._templates)

    @staticmethod
    def from_dict(data) -> "RecipeCatalog":
        '''
        Accepts either the sectioned layout {category: {cuisine: [templates]}}
        or a flat list of templates carrying their own cuisine/category.
        '''
        if isinstance(data, list):
            return RecipeCatalog(RecipeTemplate.from_dict(entry) for entry in data)
        templates = []
        for category, by_cuisine in data.items():
            for cuisine, entries in by_cuisine.items():
                for entry in entries:
                    templates.append(RecipeTemplate.from_dict(entry, cuisine=cuisine, category=category))
        return RecipeCatalog(templates)

    def to_dict(self):
        return [t.to_dict() for t in self._templates]


def load_catalog(path: Optional[Path] = None) -> RecipeCatalog:
    """Read the catalog JSON. A missing or malformed catalog is fatal for planning."""
    path = Path(path) if path else CATALOG_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        catalog = RecipeCatalog.from_dict(data)
    except FileNotFoundError:
        logger.error("Recipe catalog not found: %s", path)
        raise
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.error("Invalid recipe catalog %s: %s", path, e)
        raise
    logger.debug("Loaded %d catalog templates from %s", len(catalog), path)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> RecipeCatalog:
    return load_catalog(CATALOG_FILE)


__all__ = ['RecipeCatalog', 'load_catalog', 'default_catalog']
