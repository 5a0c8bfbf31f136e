"""Vision 응답 Pydantic 모델.

- ClassificationResponseSchema: 모델에게 전달하는 구조화 출력 스키마 (엄격)
- RawWasteItem: 모델 응답 아이템을 기본값 채워 파싱 (관대)
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ecosort.domain.enums import WasteCategory
from ecosort.domain.value_objects import (
    DEFAULT_DISPOSAL_INSTRUCTION,
    UNKNOWN_ITEM_NAME,
    UNKNOWN_MATERIAL,
    WasteItem,
)

# ==========================================
# 구조화 출력 스키마
# ==========================================

CategoryLabel = Literal[
    "Biodegradable",
    "Recyclable",
    "Non-Recyclable",
    "Hazardous",
    "E-Waste",
]


class WasteItemSchema(BaseModel):
    """모델 출력 아이템 스키마."""

    item_name: str = Field(alias="itemName", description="Short descriptive name")
    material: str = Field(description="Primary material")
    category: CategoryLabel
    confidence: float = Field(ge=0.0, le=1.0)
    disposal_instruction: str = Field(
        alias="disposalInstruction",
        description="One concise sentence on proper disposal",
    )
    recycling_tips: list[str] = Field(alias="recyclingTips", description="Two short tips")
    fun_fact: str = Field(default="", alias="funFact", description="A short interesting fact")


class ClassificationResponseSchema(BaseModel):
    """모델 출력 루트 스키마."""

    items: list[WasteItemSchema]


# ==========================================
# 관대한 파싱 (parse with defaults)
# ==========================================


class RawWasteItem(BaseModel):
    """모델이 반환한 아이템 레코드.

    누락/타입 불일치 필드는 모두 sentinel 값으로 대체되므로
    dict 입력에 대해 검증 실패가 발생하지 않습니다.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    item_name: str = Field(UNKNOWN_ITEM_NAME, alias="itemName")
    material: str = UNKNOWN_MATERIAL
    category: str = ""
    confidence: float = 0.0
    disposal_instruction: str = Field(DEFAULT_DISPOSAL_INSTRUCTION, alias="disposalInstruction")
    recycling_tips: list[str] = Field(default_factory=list, alias="recyclingTips")
    fun_fact: str | None = Field(None, alias="funFact")

    @field_validator("item_name", "material", "disposal_instruction", mode="before")
    @classmethod
    def _text_or_sentinel(cls, value: Any, info: ValidationInfo) -> str:
        if isinstance(value, str) and value.strip():
            return value
        return cls.model_fields[info.field_name].default

    @field_validator("category", mode="before")
    @classmethod
    def _category_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("confidence", mode="before")
    @classmethod
    def _numeric_or_zero(cls, value: Any) -> float:
        # bool은 int의 서브클래스라 명시적으로 제외
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.0
        try:
            return float(value)
        except OverflowError:
            # float 범위를 넘는 JSON 정수
            return 0.0

    @field_validator("recycling_tips", mode="before")
    @classmethod
    def _tip_list(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value] if value.strip() else []
        if isinstance(value, list):
            return [tip for tip in value if isinstance(tip, str)]
        return []

    @field_validator("fun_fact", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    def to_domain(self) -> WasteItem:
        """카테고리 정규화 후 도메인 객체로 변환."""
        return WasteItem(
            item_name=self.item_name,
            material=self.material,
            category=WasteCategory.from_label(self.category),
            confidence=self.confidence,
            disposal_instruction=self.disposal_instruction,
            recycling_tips=tuple(self.recycling_tips),
            fun_fact=self.fun_fact,
        )
