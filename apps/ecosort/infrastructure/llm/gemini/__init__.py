"""Google Gemini Vision Adapter."""

from ecosort.infrastructure.llm.gemini.vision import GeminiVisionAdapter

__all__ = ["GeminiVisionAdapter"]
