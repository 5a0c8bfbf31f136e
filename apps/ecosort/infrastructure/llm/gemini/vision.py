"""Google Gemini Vision Adapter - VisionModelPort 구현체.

Gemini API generate_content 사용 (gemini-3-flash-preview).
"""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from ecosort.application.classify.dto.vision_request import VisionRequest
from ecosort.application.classify.ports.vision_model import VisionModelPort
from ecosort.infrastructure.llm.gemini.config import (
    GEMINI_TIMEOUT_MS,
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
)

logger = logging.getLogger(__name__)


class GeminiVisionAdapter(VisionModelPort):
    """Google Gemini Vision API 구현체.

    이미지는 inline bytes로 전달 (업로드/URL 없음). 요청 1회 후 클라이언트를 닫습니다.
    response_schema가 있으면 JSON 스키마 기반 구조화 출력.
    """

    def __init__(
        self,
        model: str = "gemini-3-flash-preview",
        api_key: str | None = None,
    ):
        """초기화.

        Args:
            model: Gemini 모델명 (기본: gemini-3-flash-preview)
            api_key: Gemini API 키
        """
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=GEMINI_TIMEOUT_MS),
        )
        self._model = model
        logger.debug("GeminiVisionAdapter initialized (model=%s)", model)

    async def generate(self, request: VisionRequest) -> str | None:
        """이미지 + 프롬프트 제출 후 응답 텍스트 반환.

        Args:
            request: Vision 요청

        Returns:
            응답 텍스트 (없으면 None)
        """
        contents = [
            types.Part.from_bytes(data=request.image_bytes, mime_type=request.mime_type),
            request.prompt,
        ]

        config: dict[str, Any] = {
            "max_output_tokens": MAX_OUTPUT_TOKENS,
            "temperature": TEMPERATURE,
        }
        if request.response_schema is not None:
            config["response_mime_type"] = "application/json"
            config["response_json_schema"] = request.response_schema

        logger.debug("Vision API call starting (model=%s)", self._model)

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=config,
            )
        finally:
            await self._client.aio.aclose()

        text = response.text
        logger.debug(
            "Vision API call completed (model=%s, chars=%d)",
            self._model,
            len(text or ""),
        )
        return text
