"""Classify Services."""

from ecosort.application.classify.services.classification_service import (
    ClassificationService,
)
from ecosort.application.classify.services.image_payload import (
    ImagePayload,
    decode_image_payload,
)
from ecosort.application.classify.services.response_parser import (
    parse_classification_response,
    strip_code_fences,
)

__all__ = [
    "ClassificationService",
    "ImagePayload",
    "decode_image_payload",
    "parse_classification_response",
    "strip_code_fences",
]
