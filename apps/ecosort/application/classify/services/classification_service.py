"""Classification Service - 이미지 → 정규화된 폐기물 목록.

VisionModelPort와 PromptRepositoryPort만 의존.
API Key와 모델 클라이언트는 호출마다 새로 resolve 합니다
(앱 기동 후 주입된 키도 반영, 키가 없어도 앱은 기동).
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from ecosort.application.classify.dto.vision_request import VisionRequest
from ecosort.application.classify.dto.waste_response import ClassificationResponseSchema
from ecosort.application.classify.ports.prompt_repository import PromptRepositoryPort
from ecosort.application.classify.ports.vision_model import VisionModelPort
from ecosort.application.classify.services.image_payload import decode_image_payload
from ecosort.application.classify.services.response_parser import (
    parse_classification_response,
)
from ecosort.domain.enums import WasteCategory
from ecosort.domain.exceptions import ClassificationError
from ecosort.domain.value_objects import ClassificationResult

logger = logging.getLogger(__name__)

VisionModelFactory = Callable[[str], VisionModelPort]
ApiKeyResolver = Callable[[], str | None]

CLASSIFICATION_PROMPT = "waste_classification_prompt"


class ClassificationService:
    """분류 어댑터.

    상태 없음: 동시 호출은 서로 독립적이며 공유 가변 상태가 없습니다.
    재시도/캐싱/타임아웃 없음 (호출당 모델 요청 정확히 1회).
    """

    def __init__(
        self,
        vision_model_factory: VisionModelFactory,
        api_key_resolver: ApiKeyResolver,
        prompt_repository: PromptRepositoryPort,
        structured_output: bool = True,
    ):
        """초기화.

        Args:
            vision_model_factory: API Key → VisionModelPort 생성 함수
            api_key_resolver: 호출 시점에 API Key를 읽는 함수
            prompt_repository: 프롬프트 리포지토리 Port
            structured_output: 출력 스키마 강제 여부
        """
        self._vision_model_factory = vision_model_factory
        self._resolve_api_key = api_key_resolver
        self._prompts = prompt_repository
        self._structured_output = structured_output

    async def classify(self, image: str) -> ClassificationResult:
        """이미지 분류.

        Args:
            image: base64 이미지 (data URI 허용)

        Returns:
            ClassificationResult (아이템 0개도 정상)

        Raises:
            InvalidImagePayloadError: 이미지 디코딩 실패
            ClassificationError: 설정/모델 호출/응답 형식 오류
        """
        start = time.perf_counter()
        payload = decode_image_payload(image)

        api_key = self._resolve_api_key()
        if not api_key:
            raise ClassificationError.configuration("Vision model API key is not set")

        request = VisionRequest(
            image_bytes=payload.data,
            mime_type=payload.mime_type,
            prompt=self._render_prompt(self._prompts.get_prompt(CLASSIFICATION_PROMPT)),
            response_schema=(
                ClassificationResponseSchema.model_json_schema()
                if self._structured_output
                else None
            ),
        )

        logger.info(
            "Classification started",
            extra={
                "mime_type": request.mime_type,
                "image_bytes": len(request.image_bytes),
                "schema_enforced": request.is_schema_enforced,
            },
        )

        try:
            vision_model = self._vision_model_factory(api_key)
            text = await vision_model.generate(request)
        except Exception as e:
            raise ClassificationError.upstream(f"Vision model call failed: {e}") from e

        if not text or not text.strip():
            raise ClassificationError.upstream("Vision model returned no text")

        result = parse_classification_response(
            text,
            schema_enforced=request.is_schema_enforced,
        )

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Classification completed",
            extra={
                "elapsed_ms": elapsed,
                "item_count": len(result.items),
                "categories": [item.category.value for item in result.items],
            },
        )
        return result

    def _render_prompt(self, template: str) -> str:
        """프롬프트 렌더링 (순수 함수).

        Args:
            template: 프롬프트 템플릿

        Returns:
            허용 카테고리 라벨이 채워진 프롬프트
        """
        labels = ", ".join(WasteCategory.prompt_labels())
        return template.replace("{{CATEGORY_LABELS}}", labels)
