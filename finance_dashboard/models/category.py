from typing import Dict, Tuple

# Fixed, ordered category set. Order drives chart and summary output.
CATEGORIES: Tuple[str, ...] = (
    "Food",
    "Transport",
    "Housing",
    "Leisure",
    "Education",
    "Health",
    "Other",
)

# Chart slice colours, one per category in the same order.
CATEGORY_COLORS: Dict[str, str] = dict(zip(CATEGORIES, (
    "#8884d8",
    "#82ca9d",
    "#ffc658",
    "#d88484",
    "#84d8c8",
    "#a384d8",
    "#d8b284",
)))

FALLBACK_COLOR = "#888888"


def color_for(category: str) -> str:
    return CATEGORY_COLORS.get(category, FALLBACK_COLOR)
