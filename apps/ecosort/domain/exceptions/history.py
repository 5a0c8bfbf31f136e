"""히스토리 도메인 예외."""

from ecosort.domain.exceptions.base import DomainError


class ScanRecordNotFoundError(DomainError):
    """스캔 기록을 찾을 수 없음."""

    def __init__(self, scan_id: str | None = None) -> None:
        message = f"Scan record not found: {scan_id}" if scan_id else "Scan record not found"
        super().__init__(message)


class HistoryUnavailableError(DomainError):
    """히스토리 저장소에 접근할 수 없음."""

    def __init__(self, reason: str = "Scan history is temporarily unavailable") -> None:
        super().__init__(reason)
