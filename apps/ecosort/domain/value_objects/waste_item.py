"""WasteItem Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ecosort.domain.enums import WasteCategory

UNKNOWN_ITEM_NAME = "Unknown Item"
UNKNOWN_MATERIAL = "Unknown Material"
DEFAULT_DISPOSAL_INSTRUCTION = "Dispose of carefully."


@dataclass(frozen=True, slots=True)
class WasteItem:
    """이미지에서 식별된 폐기물 한 개.

    Attributes:
        item_name: 짧은 이름 (예: "Plastic Water Bottle")
        material: 주 재질 (예: "Plastic")
        category: 정규화된 카테고리 (모델 값을 그대로 쓰지 않음)
        confidence: 신뢰도 (0.0 ~ 1.0 의도, 범위 보정 없음)
        disposal_instruction: 배출 방법 한 문장
        recycling_tips: 재활용 팁 목록
        fun_fact: 재미있는 사실 (optional)
    """

    item_name: str = UNKNOWN_ITEM_NAME
    material: str = UNKNOWN_MATERIAL
    category: WasteCategory = WasteCategory.UNKNOWN
    confidence: float = 0.0
    disposal_instruction: str = DEFAULT_DISPOSAL_INSTRUCTION
    recycling_tips: tuple[str, ...] = ()
    fun_fact: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WasteItem:
        """저장된 camelCase 딕셔너리에서 복원.

        카테고리는 다시 정규화하므로 이미 정규화된 값은 그대로 유지됩니다.
        """
        return cls(
            item_name=data.get("itemName") or UNKNOWN_ITEM_NAME,
            material=data.get("material") or UNKNOWN_MATERIAL,
            category=WasteCategory.from_label(data.get("category")),
            confidence=float(data.get("confidence") or 0.0),
            disposal_instruction=data.get("disposalInstruction") or DEFAULT_DISPOSAL_INSTRUCTION,
            recycling_tips=tuple(data.get("recyclingTips") or ()),
            fun_fact=data.get("funFact"),
        )

    def to_dict(self) -> dict[str, Any]:
        """camelCase 딕셔너리로 변환 (API 응답/히스토리 저장용).

        fun_fact가 없으면 키 자체를 생략합니다.
        """
        data: dict[str, Any] = {
            "itemName": self.item_name,
            "material": self.material,
            "category": self.category.value,
            "confidence": self.confidence,
            "disposalInstruction": self.disposal_instruction,
            "recyclingTips": list(self.recycling_tips),
        }
        if self.fun_fact is not None:
            data["funFact"] = self.fun_fact
        return data
