"""Fixed category registry used to label transactions and budgets."""

from typing import List

from components.category import schemas

OTHER_CATEGORY_ID = "other"
NEUTRAL_COLOR = "#6b7280"

CATEGORIES: List[schemas.Category] = [
    schemas.Category(id="groceries", name="Groceries", color="#4f46e5"),
    schemas.Category(id="dining", name="Dining Out", color="#ef4444"),
    schemas.Category(id="utilities", name="Utilities", color="#10b981"),
    schemas.Category(id="transportation", name="Transportation", color="#f59e0b"),
    schemas.Category(id="entertainment", name="Entertainment", color="#8b5cf6"),
    schemas.Category(id="shopping", name="Shopping", color="#ec4899"),
    schemas.Category(id="healthcare", name="Healthcare", color="#06b6d4"),
    schemas.Category(id="housing", name="Housing", color="#f97316"),
    schemas.Category(id="education", name="Education", color="#14b8a6"),
    schemas.Category(id=OTHER_CATEGORY_ID, name="Other", color=NEUTRAL_COLOR),
]

_BY_ID = {category.id: category for category in CATEGORIES}


def get_category_by_id(category_id: str) -> schemas.Category:
    """Look up a category, falling back to the "other" entry for unknown ids."""
    return _BY_ID.get(category_id, _BY_ID[OTHER_CATEGORY_ID])


def resolve_category(category_id: str) -> schemas.Category:
    """
    Look up a category, falling back to a synthetic entry for unknown ids.

    Unlike get_category_by_id, the raw id is kept as the display name so
    stray categories stay distinguishable in breakdown charts.
    """
    category = _BY_ID.get(category_id)
    if category is None:
        return schemas.Category(id=category_id, name=category_id, color=NEUTRAL_COLOR)
    return category


def category_options() -> List[schemas.CategoryOption]:
    """Value/label pairs for category dropdowns."""
    return [schemas.CategoryOption(value=cat.id, label=cat.name) for cat in CATEGORIES]
