"""History Service - 스캔 히스토리 기록/조회/통계."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from ecosort.application.history.ports.history_repository import HistoryRepositoryPort
from ecosort.domain.enums import WasteCategory
from ecosort.domain.exceptions import ScanRecordNotFoundError
from ecosort.domain.value_objects import (
    CategoryDistribution,
    CategoryStat,
    ClassificationResult,
    ScanRecord,
)

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class HistoryService:
    """스캔 히스토리 서비스.

    성공한 분류 결과만 기록됩니다 (실패한 호출은 기록 없음).
    """

    def __init__(
        self,
        repository: HistoryRepositoryPort,
        clock: Callable[[], int] = _now_ms,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._repository = repository
        self._clock = clock
        self._id_factory = id_factory

    async def record(self, result: ClassificationResult) -> ScanRecord:
        """분류 결과를 히스토리에 추가.

        Args:
            result: 성공한 분류 결과

        Returns:
            id/timestamp가 부여된 ScanRecord
        """
        record = ScanRecord.from_result(
            scan_id=self._id_factory(),
            timestamp=self._clock(),
            result=result,
        )
        await self._repository.add(record)
        logger.info(
            "scan_recorded",
            extra={"scan_id": record.id, "item_count": len(record.items)},
        )
        return record

    async def list_all(self) -> list[ScanRecord]:
        return await self._repository.list_all()

    async def delete(self, scan_id: str) -> None:
        """기록 1건 삭제.

        Raises:
            ScanRecordNotFoundError: 해당 ID가 없는 경우
        """
        if not await self._repository.delete(scan_id):
            raise ScanRecordNotFoundError(scan_id)
        logger.info("scan_deleted", extra={"scan_id": scan_id})

    async def clear(self) -> None:
        await self._repository.clear()
        logger.info("scan_history_cleared")

    async def category_distribution(self) -> CategoryDistribution:
        """전체 기록의 카테고리 분포 (차트용).

        모든 기록의 아이템을 펼쳐 카테고리별로 집계하며,
        처음 등장한 순서를 유지합니다.
        """
        counts: dict[WasteCategory, int] = {}
        for record in await self._repository.list_all():
            for item in record.items:
                counts[item.category] = counts.get(item.category, 0) + 1

        return CategoryDistribution(
            stats=tuple(CategoryStat(category=c, count=n) for c, n in counts.items())
        )
