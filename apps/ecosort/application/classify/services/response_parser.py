"""Vision Response Parser - 모델 응답 텍스트 → ClassificationResult.

모델 출력 편차(코드 펜스, 단일 객체 응답, 누락 필드)를 흡수하는 순수 로직.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from ecosort.application.classify.dto.waste_response import RawWasteItem
from ecosort.domain.exceptions import ClassificationError
from ecosort.domain.value_objects import ClassificationResult

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    """```json ... ``` 형태의 마크다운 코드 펜스 제거."""
    return _CODE_FENCE.sub("", text).strip()


def locate_item_records(payload: Any, *, schema_enforced: bool = False) -> list[Any]:
    """파싱된 JSON에서 아이템 레코드 목록 찾기.

    1. ``items`` 배열이 있으면 그대로 사용
    2. ``itemName``이 있는 단일 객체면 1개짜리 목록으로 감쌈
    3. 그 외 객체는 아이템 없음 (빈 결과)

    Args:
        payload: json.loads 결과
        schema_enforced: 구조화 출력 모드 여부

    Returns:
        아이템 레코드 목록 (원소 타입은 검증 전)

    Raises:
        ClassificationError: 스키마 미강제 모드에서 루트가 객체가 아닌 경우
    """
    if isinstance(payload, dict):
        items = payload.get("items")
        if isinstance(items, list):
            return items
        if payload.get("itemName"):
            return [payload]
        return []

    if schema_enforced:
        return []

    raise ClassificationError.malformed(
        f"Response root is {type(payload).__name__}, expected a JSON object"
    )


def parse_classification_response(
    text: str,
    *,
    schema_enforced: bool = False,
) -> ClassificationResult:
    """모델 응답 텍스트를 정규화된 ClassificationResult로 변환.

    Args:
        text: 모델 원본 응답
        schema_enforced: 구조화 출력 모드 여부

    Returns:
        ClassificationResult (빈 결과 가능)

    Raises:
        ClassificationError: JSON 파싱 실패 또는 items 구조 변환 불가 (kind=format)
    """
    cleaned = strip_code_fences(text)

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ClassificationError.malformed(f"Response is not valid JSON: {e.msg}") from e
    except RecursionError as e:
        raise ClassificationError.malformed("Response JSON is nested too deeply") from e

    records = locate_item_records(payload, schema_enforced=schema_enforced)

    items = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(
                "waste_item_record_skipped",
                extra={"index": index, "record_type": type(record).__name__},
            )
            continue
        items.append(RawWasteItem.model_validate(record).to_domain())

    return ClassificationResult(items=tuple(items))
