"""CategoryStat Value Object - 히스토리 차트 데이터."""

from __future__ import annotations

from dataclasses import dataclass

from ecosort.domain.enums import WasteCategory

CATEGORY_COLORS: dict[WasteCategory, str] = {
    WasteCategory.BIODEGRADABLE: "#86efac",  # green-300
    WasteCategory.RECYCLABLE: "#93c5fd",  # blue-300
    WasteCategory.NON_RECYCLABLE: "#cbd5e1",  # slate-300
    WasteCategory.HAZARDOUS: "#fca5a5",  # red-300
    WasteCategory.E_WASTE: "#fcd34d",  # amber-300
    WasteCategory.UNKNOWN: "#e2e8f0",  # slate-200
}


@dataclass(frozen=True, slots=True)
class CategoryStat:
    """카테고리별 누적 아이템 수 (파이 차트 한 조각)."""

    category: WasteCategory
    count: int

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self.category]


@dataclass(frozen=True, slots=True)
class CategoryDistribution:
    """전체 히스토리의 카테고리 분포."""

    stats: tuple[CategoryStat, ...] = ()

    @property
    def total_items(self) -> int:
        return sum(stat.count for stat in self.stats)
