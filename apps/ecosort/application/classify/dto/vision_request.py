"""VisionRequest - Vision 모델로 보내는 요청."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class VisionRequest:
    """Vision 모델 요청.

    response_schema가 있으면 구조화 출력(JSON 스키마 강제) 모드.
    """

    image_bytes: bytes
    mime_type: str
    prompt: str
    response_schema: dict[str, Any] | None = None

    @property
    def is_schema_enforced(self) -> bool:
        return self.response_schema is not None

    def to_data_url(self) -> str:
        """data URI 형태 (OpenAI input_image용)."""
        encoded = base64.b64encode(self.image_bytes).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"
