from typing import Iterable, List, Optional

ALL_CATEGORIES = "all"


def distinct_categories(items: Iterable) -> List[str]:
    """Distinct category values, in first-seen order; uncategorised items add none."""
    return list(dict.fromkeys(item.category for item in items if item.category))


def filter_by_category(items: Iterable, q: Optional[str]) -> list:
    """Narrow ``items`` to an exact category match; ``all`` or empty keeps everything."""
    items = list(items)
    if not q or q == ALL_CATEGORIES:
        return items
    return [item for item in items if item.category == q]


def category_view(shopkeeper, q: Optional[str]) -> dict:
    items = list(shopkeeper.items)
    return {
        "shopkeeper": shopkeeper.to_dict(),
        "items": [i.to_dict() for i in filter_by_category(items, q)],
        "categories": distinct_categories(items),
        "q": q or ALL_CATEGORIES,
    }
