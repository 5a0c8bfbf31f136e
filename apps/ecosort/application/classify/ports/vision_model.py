"""Vision Model Port - 이미지 분석 추상화."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecosort.application.classify.dto.vision_request import VisionRequest


class VisionModelPort(ABC):
    """Vision 모델 포트 - 요청 제출 → 응답 텍스트.

    Gemini, GPT 등 구현체를 DI로 주입.
    응답 정규화는 구현체가 아니라 ClassificationService가 담당합니다.
    """

    @abstractmethod
    async def generate(self, request: VisionRequest) -> str | None:
        """이미지 + 지시문을 제출하고 모델의 원본 텍스트를 반환.

        Args:
            request: 이미지 바이트, MIME 타입, 프롬프트, 출력 스키마(optional)

        Returns:
            모델 응답 텍스트 (응답이 비어 있으면 None)

        Raises:
            Exception: SDK/네트워크 오류는 그대로 전파
        """
        pass
