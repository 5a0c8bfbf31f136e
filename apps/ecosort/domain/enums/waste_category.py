"""Waste Category Enum."""

from __future__ import annotations

from enum import Enum

# 키워드 매칭 순서가 곧 우선순위 (first-match-wins).
# 생분해/일반쓰레기 키워드가 재질 키워드(plastic 등)보다 먼저 검사되어야 함.
_KEYWORD_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Biodegradable", ("bio", "organic", "compost")),
    ("Non-Recyclable", ("non-recyclable", "residual", "landfill")),
    ("Recyclable", ("recyclable", "paper", "plastic", "glass", "metal")),
    ("Hazardous", ("hazard", "toxic")),
    ("E-Waste", ("e-waste", "electronic")),
)


class WasteCategory(str, Enum):
    """폐기물 분류 카테고리.

    UNKNOWN은 어떤 키워드에도 매칭되지 않을 때만 사용되는 기본값.
    """

    BIODEGRADABLE = "Biodegradable"
    RECYCLABLE = "Recyclable"
    NON_RECYCLABLE = "Non-Recyclable"
    HAZARDOUS = "Hazardous"
    E_WASTE = "E-Waste"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str | None) -> WasteCategory:
        """모델이 반환한 자유 형식 카테고리 문자열 → WasteCategory.

        대소문자 구분 없이 키워드 포함 여부로 판단합니다.
        정규화된 값을 다시 넣어도 같은 카테고리가 나옵니다.

        Args:
            label: 원본 카테고리 문자열 (None 허용)

        Returns:
            매칭된 카테고리 (없으면 UNKNOWN)
        """
        if not isinstance(label, str):
            return cls.UNKNOWN

        lowered = label.lower()
        for value, keywords in _KEYWORD_RULES:
            if any(keyword in lowered for keyword in keywords):
                return cls(value)
        return cls.UNKNOWN

    @classmethod
    def prompt_labels(cls) -> list[str]:
        """모델에게 허용되는 카테고리 라벨 (UNKNOWN 제외)."""
        return [category.value for category in cls if category is not cls.UNKNOWN]
