"""Image Payload Decoding - base64 / data URI → 바이트."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass

from ecosort.domain.exceptions import InvalidImagePayloadError

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URI_PREFIX = re.compile(r"^data:(?P<mime>image/[\w.+-]+);base64,", re.IGNORECASE)
_MIME_ALIASES = {"image/jpg": "image/jpeg"}


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """디코딩된 이미지."""

    data: bytes
    mime_type: str = DEFAULT_MIME_TYPE


def decode_image_payload(image: str) -> ImagePayload:
    """업로드된 이미지 문자열 디코딩.

    data URI 헤더가 있으면 제거하고 MIME 타입을 가져옵니다.
    헤더가 없는 base64는 JPEG로 간주합니다.

    Args:
        image: base64 문자열 (``data:image/png;base64,...`` 형식 허용)

    Returns:
        ImagePayload

    Raises:
        InvalidImagePayloadError: 비어 있거나 base64가 아닌 경우
    """
    if not isinstance(image, str) or not image.strip():
        raise InvalidImagePayloadError("Image payload is empty")

    encoded = image.strip()
    mime_type = DEFAULT_MIME_TYPE

    match = _DATA_URI_PREFIX.match(encoded)
    if match:
        mime_type = match.group("mime").lower()
        mime_type = _MIME_ALIASES.get(mime_type, mime_type)
        encoded = encoded[match.end() :]

    # 줄바꿈 포함 base64 허용
    encoded = "".join(encoded.split())

    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImagePayloadError("Image payload is not valid base64") from e

    if not data:
        raise InvalidImagePayloadError("Image payload decodes to zero bytes")

    return ImagePayload(data=data, mime_type=mime_type)
