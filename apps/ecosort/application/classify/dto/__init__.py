"""Classify DTOs."""

from ecosort.application.classify.dto.vision_request import VisionRequest
from ecosort.application.classify.dto.waste_response import (
    ClassificationResponseSchema,
    RawWasteItem,
    WasteItemSchema,
)

__all__ = [
    "ClassificationResponseSchema",
    "RawWasteItem",
    "VisionRequest",
    "WasteItemSchema",
]
