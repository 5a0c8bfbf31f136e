"""EcoSort 도메인 예외."""

from ecosort.domain.exceptions.base import DomainError
from ecosort.domain.exceptions.classification import (
    ClassificationError,
    ClassificationErrorKind,
    InvalidImagePayloadError,
    UnsupportedModelError,
)
from ecosort.domain.exceptions.history import HistoryUnavailableError, ScanRecordNotFoundError

__all__ = [
    "ClassificationError",
    "ClassificationErrorKind",
    "DomainError",
    "HistoryUnavailableError",
    "InvalidImagePayloadError",
    "ScanRecordNotFoundError",
    "UnsupportedModelError",
]
