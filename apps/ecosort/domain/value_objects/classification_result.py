"""ClassificationResult Value Object."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any

from ecosort.domain.enums import WasteCategory
from ecosort.domain.value_objects.waste_item import WasteItem


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """이미지 한 장의 분류 결과.

    items가 비어 있어도 정상 결과 (모델이 아무것도 찾지 못한 경우).
    """

    items: tuple[WasteItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items

    def category_counts(self) -> Counter[WasteCategory]:
        """카테고리별 아이템 수."""
        return Counter(item.category for item in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {"items": [item.to_dict() for item in self.items]}
