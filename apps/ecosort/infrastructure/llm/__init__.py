"""LLM Infrastructure Adapters.

모델 패밀리별 Vision 구현체:
- gemini/: Gemini 모델 (gemini-3-flash-preview, gemini-2.5-*)
- gpt/: GPT 모델 (gpt-5.1, gpt-5.2)
"""

from ecosort.infrastructure.llm.gemini import GeminiVisionAdapter
from ecosort.infrastructure.llm.gpt import GPTVisionAdapter

__all__ = [
    "GPTVisionAdapter",
    "GeminiVisionAdapter",
]
