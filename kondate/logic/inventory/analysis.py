"""Inventory and preference hints for the remote menu generator."""
from __future__ import annotations
import unicodedata
from datetime import date
from typing import Dict, List

from kondate.domain.Categories import PriorityHint
from kondate.domain.InventoryItem import InventoryItem
from kondate.utilities.constants import ALLERGY_KEYWORDS, DISLIKE_KEYWORDS, NEAR_EXPIRY_DAYS, OVERSTOCK_AMOUNT

__all__ = ["priority_hint", "extract_preferences"]


def priority_hint(item: InventoryItem, today: date) -> PriorityHint:
    """near_expiry within NEAR_EXPIRY_DAYS (expired lots included), else overstock above OVERSTOCK_AMOUNT."""
    days_left = item.days_until_expiry(today)
    if days_left is not None and days_left <= NEAR_EXPIRY_DAYS:
        return PriorityHint.NEAR_EXPIRY
    if item.amount > OVERSTOCK_AMOUNT:
        return PriorityHint.OVERSTOCK
    return PriorityHint.NORMAL


def _matches(text: str, keywords: Dict[str, tuple]) -> List[str]:
    return [label for label, phrases in keywords.items() if any(p in text for p in phrases)]


def extract_preferences(text: str | None) -> Dict[str, List[str]]:
    """Pick allergy / dislike labels out of free text such as "卵アレルギー、魚NG"."""
    normalized = unicodedata.normalize('NFKC', text or '').casefold()
    return {
        'allergies': _matches(normalized, ALLERGY_KEYWORDS),
        'dislikes': _matches(normalized, DISLIKE_KEYWORDS),
    }
