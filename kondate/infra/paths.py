from kondate.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
CATALOG_FILE = DATA_DIR / 'recipe_catalog.json'

__all__ = ['DATA_DIR', 'CATALOG_FILE']
