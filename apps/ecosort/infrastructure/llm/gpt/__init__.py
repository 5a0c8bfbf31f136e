"""OpenAI GPT Vision Adapter."""

from ecosort.infrastructure.llm.gpt.vision import GPTVisionAdapter

__all__ = ["GPTVisionAdapter"]
