"""ScanRecord Value Object - 히스토리 항목."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ecosort.domain.value_objects.classification_result import ClassificationResult
from ecosort.domain.value_objects.waste_item import WasteItem


@dataclass(frozen=True, slots=True)
class ScanRecord:
    """성공한 스캔 1건.

    Attributes:
        id: 스캔 ID
        timestamp: 스캔 시각 (epoch milliseconds)
        items: 분류된 아이템 목록
    """

    id: str
    timestamp: int
    items: tuple[WasteItem, ...] = ()

    @classmethod
    def from_result(
        cls,
        scan_id: str,
        timestamp: int,
        result: ClassificationResult,
    ) -> ScanRecord:
        return cls(id=scan_id, timestamp=timestamp, items=result.items)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScanRecord:
        return cls(
            id=str(data["id"]),
            timestamp=int(data["timestamp"]),
            items=tuple(WasteItem.from_dict(item) for item in data.get("items", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "items": [item.to_dict() for item in self.items],
        }
