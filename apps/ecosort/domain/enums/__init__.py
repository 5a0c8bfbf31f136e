"""Domain Enums."""

from ecosort.domain.enums.waste_category import WasteCategory

__all__ = ["WasteCategory"]
