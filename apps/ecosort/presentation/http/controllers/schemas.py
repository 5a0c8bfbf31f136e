"""HTTP 응답 스키마 (camelCase wire format)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ecosort.domain.value_objects import ScanRecord, WasteItem


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WasteItemResponse(CamelModel):
    """폐기물 아이템."""

    item_name: str
    material: str
    category: str
    confidence: float
    disposal_instruction: str
    recycling_tips: list[str]
    fun_fact: str | None = None

    @classmethod
    def from_domain(cls, item: WasteItem) -> WasteItemResponse:
        return cls.model_validate(item.to_dict())


class ScanRecordResponse(CamelModel):
    """스캔 기록."""

    id: str = Field(description="스캔 ID")
    timestamp: int = Field(description="스캔 시각 (epoch ms)")
    items: list[WasteItemResponse]

    @classmethod
    def from_domain(cls, record: ScanRecord) -> ScanRecordResponse:
        return cls(
            id=record.id,
            timestamp=record.timestamp,
            items=[WasteItemResponse.from_domain(item) for item in record.items],
        )
