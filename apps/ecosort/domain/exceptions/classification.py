"""분류(Classification) 도메인 예외."""

from __future__ import annotations

from enum import Enum

from ecosort.domain.exceptions.base import DomainError

DEFAULT_FAILURE_MESSAGE = "Failed to analyze the image. Please try again."


class ClassificationErrorKind(str, Enum):
    """분류 실패 원인 종류."""

    CONFIGURATION = "configuration"  # API Key 누락 (네트워크 호출 전)
    UPSTREAM = "upstream"  # 모델 호출 실패 / 빈 응답
    FORMAT = "format"  # JSON 파싱 불가 / items 구조로 변환 불가


class ClassificationError(DomainError):
    """분류 실패 - 호출자에게 노출되는 단일 실패 타입.

    원인 예외는 ``raise ... from e``로 ``__cause__``에 보존됩니다.

    Attributes:
        kind: 실패 종류
        reason: 로그용 내부 상세 (사용자에게 노출하지 않음)
    """

    def __init__(
        self,
        kind: ClassificationErrorKind,
        reason: str,
        message: str = DEFAULT_FAILURE_MESSAGE,
    ) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(message)

    @classmethod
    def configuration(cls, reason: str) -> ClassificationError:
        return cls(
            ClassificationErrorKind.CONFIGURATION,
            reason,
            message="Image analysis is not configured. Please set the API key.",
        )

    @classmethod
    def upstream(cls, reason: str) -> ClassificationError:
        return cls(ClassificationErrorKind.UPSTREAM, reason)

    @classmethod
    def malformed(cls, reason: str) -> ClassificationError:
        return cls(ClassificationErrorKind.FORMAT, reason)


class InvalidImagePayloadError(DomainError):
    """이미지 페이로드가 비어 있거나 base64로 디코딩되지 않음."""

    def __init__(self, reason: str = "Image payload is empty or not valid base64") -> None:
        super().__init__(reason)


class UnsupportedModelError(DomainError):
    """지원하지 않는 모델."""

    def __init__(self, model: str, supported_models: list[str]) -> None:
        self.model = model
        self.supported_models = supported_models
        super().__init__(f"Unsupported model: '{model}'")
