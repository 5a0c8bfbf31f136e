"""GPT Vision Adapter - VisionModelPort 구현체.

OpenAI responses API 사용 (gpt-5.1/5.2).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from openai import AsyncOpenAI

from ecosort.application.classify.dto.vision_request import VisionRequest
from ecosort.application.classify.ports.vision_model import VisionModelPort
from ecosort.infrastructure.llm.gpt.config import (
    MAX_RETRIES,
    OPENAI_LIMITS,
    OPENAI_TIMEOUT,
)

logger = logging.getLogger(__name__)

RESPONSE_FORMAT_NAME = "waste_classification"


class GPTVisionAdapter(VisionModelPort):
    """GPT Vision API 구현체.

    이미지는 data URI로 전달. 요청 1회 후 클라이언트를 닫습니다.
    """

    def __init__(
        self,
        model: str = "gpt-5.1",
        api_key: str | None = None,
    ):
        """초기화.

        Args:
            model: GPT 모델명 (기본: gpt-5.1)
            api_key: OpenAI API 키
        """
        http_client = httpx.AsyncClient(
            timeout=OPENAI_TIMEOUT,
            limits=OPENAI_LIMITS,
        )
        self._client = AsyncOpenAI(
            api_key=api_key,
            http_client=http_client,
            max_retries=MAX_RETRIES,
        )
        self._model = model
        logger.debug("GPTVisionAdapter initialized (model=%s)", model)

    async def generate(self, request: VisionRequest) -> str | None:
        """이미지 + 프롬프트 제출 후 응답 텍스트 반환.

        Args:
            request: Vision 요청

        Returns:
            응답 텍스트 (없으면 None)
        """
        content_items = [
            {"type": "input_text", "text": request.prompt},
            {"type": "input_image", "image_url": request.to_data_url(), "detail": "auto"},
        ]

        options: dict[str, Any] = {}
        if request.response_schema is not None:
            # funFact가 optional이므로 strict 모드 사용 불가
            options["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": RESPONSE_FORMAT_NAME,
                    "schema": request.response_schema,
                    "strict": False,
                }
            }

        logger.debug("Vision API call starting (model=%s)", self._model)

        try:
            response = await self._client.responses.create(
                model=self._model,
                input=[{"role": "user", "content": content_items}],
                **options,
            )
        finally:
            await self._client.close()

        text = response.output_text
        logger.debug(
            "Vision API call completed (model=%s, chars=%d)",
            self._model,
            len(text or ""),
        )
        return text
