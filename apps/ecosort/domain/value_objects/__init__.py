"""Domain Value Objects."""

from ecosort.domain.value_objects.category_stat import (
    CATEGORY_COLORS,
    CategoryDistribution,
    CategoryStat,
)
from ecosort.domain.value_objects.classification_result import ClassificationResult
from ecosort.domain.value_objects.scan_record import ScanRecord
from ecosort.domain.value_objects.waste_item import (
    DEFAULT_DISPOSAL_INSTRUCTION,
    UNKNOWN_ITEM_NAME,
    UNKNOWN_MATERIAL,
    WasteItem,
)

__all__ = [
    "CATEGORY_COLORS",
    "DEFAULT_DISPOSAL_INSTRUCTION",
    "UNKNOWN_ITEM_NAME",
    "UNKNOWN_MATERIAL",
    "CategoryDistribution",
    "CategoryStat",
    "ClassificationResult",
    "ScanRecord",
    "WasteItem",
]
