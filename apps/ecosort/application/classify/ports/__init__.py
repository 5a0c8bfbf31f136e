"""Classify Ports."""

from ecosort.application.classify.ports.prompt_repository import PromptRepositoryPort
from ecosort.application.classify.ports.vision_model import VisionModelPort

__all__ = ["PromptRepositoryPort", "VisionModelPort"]
