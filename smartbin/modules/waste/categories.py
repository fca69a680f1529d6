from enum import Enum

class WasteCategory(str, Enum):
    BIODEGRADABLE = "biodegradable"
    RECYCLABLE = "recyclable"
    MISCELLANEOUS = "miscellaneous"

CATEGORY_VALUES = tuple(c.value for c in WasteCategory)

def parse_category(value) -> WasteCategory | None:
    """Exact match only; anything else (including None and "") is rejected."""
    if isinstance(value, str) and value in CATEGORY_VALUES:
        return WasteCategory(value)
    return None
