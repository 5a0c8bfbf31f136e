"""History API Controller.

- GET /scan/history: 최근 스캔 목록
- GET /scan/history/stats: 카테고리 분포 (차트)
- DELETE /scan/history: 전체 삭제
- DELETE /scan/history/{scan_id}: 1건 삭제
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from ecosort.presentation.http.controllers.schemas import CamelModel, ScanRecordResponse
from ecosort.setup.dependencies import HistoryServiceDep

router = APIRouter(prefix="/scan/history", tags=["history"])


class CategoryStatResponse(BaseModel):
    """차트 조각."""

    name: str
    value: int
    color: str


class HistoryStatsResponse(CamelModel):
    """카테고리 분포."""

    total_items: int = Field(description="전체 아이템 수")
    categories: list[CategoryStatResponse]


@router.get(
    "",
    response_model=list[ScanRecordResponse],
    response_model_exclude_none=True,
    summary="Recent scans (newest first)",
)
async def list_history(history: HistoryServiceDep) -> list[ScanRecordResponse]:
    records = await history.list_all()
    return [ScanRecordResponse.from_domain(record) for record in records]


@router.get(
    "/stats",
    response_model=HistoryStatsResponse,
    summary="Item count per waste category",
)
async def history_stats(history: HistoryServiceDep) -> HistoryStatsResponse:
    distribution = await history.category_distribution()
    return HistoryStatsResponse(
        total_items=distribution.total_items,
        categories=[
            CategoryStatResponse(
                name=stat.category.value,
                value=stat.count,
                color=stat.color,
            )
            for stat in distribution.stats
        ],
    )


@router.delete("", status_code=204, summary="Clear scan history")
async def clear_history(history: HistoryServiceDep) -> Response:
    await history.clear()
    return Response(status_code=204)


@router.delete("/{scan_id}", status_code=204, summary="Delete one scan record")
async def delete_scan(scan_id: str, history: HistoryServiceDep) -> Response:
    """스캔 기록 1건 삭제 (없으면 404)."""
    await history.delete(scan_id)
    return Response(status_code=204)
