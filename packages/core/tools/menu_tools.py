from __future__ import annotations

from typing import Dict


MENU_NOT_FOUND = "No Menu Found"

TODAYS_MENU: Dict[str, str] = {
    "breakfast": "Egg Dosa, Idly, Chutney",
    "lunch": "Sangati and chicken curry",
    "dinner": "Chapati and Egg bhurji",
}


def _normalize_category(category: str) -> str:
    return category.strip().lower()


def get_menu(category: str) -> str:
    """Look up today's menu.

    Args:
        category: Type of food. Example: breakfast, lunch, dinner
    """
    return TODAYS_MENU.get(_normalize_category(category), MENU_NOT_FOUND)
