"""Scan API Controller.

메인 API 엔드포인트:
- POST /scan: 이미지 분류 + 히스토리 기록
- GET /scan/categories: 카테고리 목록
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ecosort.domain.enums import WasteCategory
from ecosort.domain.value_objects import CATEGORY_COLORS
from ecosort.presentation.http.controllers.schemas import ScanRecordResponse
from ecosort.setup.dependencies import (
    ClassificationServiceFactoryDep,
    HistoryServiceDep,
)

router = APIRouter(prefix="/scan", tags=["scan"])
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class ScanRequest(BaseModel):
    """분류 요청 스키마."""

    image: str = Field(
        min_length=1,
        description="base64 이미지 (data:image/...;base64, 헤더 허용)",
    )
    model: str | None = Field(
        default=None,
        description="Vision 모델명 (미지정 시 gemini-3-flash-preview)",
        examples=["gemini-3-flash-preview", "gemini-2.5-flash", "gpt-5.1"],
    )


class CategoryResponse(BaseModel):
    """카테고리 스키마."""

    name: str
    color: str


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "",
    response_model=ScanRecordResponse,
    response_model_exclude_none=True,
    summary="Classify waste in an image",
)
async def scan(
    payload: ScanRequest,
    service_factory: ClassificationServiceFactoryDep,
    history: HistoryServiceDep,
) -> ScanRecordResponse:
    """이미지의 폐기물을 분류하고 히스토리에 기록합니다.

    분류에 실패하면 히스토리는 변경되지 않습니다.
    """
    service = service_factory(payload.model)
    result = await service.classify(payload.image)
    record = await history.record(result)
    return ScanRecordResponse.from_domain(record)


@router.get(
    "/categories",
    response_model=list[CategoryResponse],
    summary="Supported waste categories",
)
def get_categories() -> list[CategoryResponse]:
    """모델이 반환할 수 있는 폐기물 카테고리 목록을 반환합니다."""
    return [
        CategoryResponse(name=label, color=CATEGORY_COLORS[WasteCategory(label)])
        for label in WasteCategory.prompt_labels()
    ]
