"""History Repository Port - 스캔 히스토리 저장소 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecosort.domain.value_objects import ScanRecord


class HistoryRepositoryPort(ABC):
    """스캔 히스토리 저장소 포트.

    최신 기록이 앞에 오며, 구현체가 최대 보관 개수를 유지합니다.
    """

    @abstractmethod
    async def add(self, record: ScanRecord) -> None:
        """기록 추가 (맨 앞)."""
        pass

    @abstractmethod
    async def list_all(self) -> list[ScanRecord]:
        """전체 기록 조회 (최신순)."""
        pass

    @abstractmethod
    async def delete(self, scan_id: str) -> bool:
        """기록 삭제.

        Returns:
            삭제 여부 (없으면 False)
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """전체 삭제."""
        pass
