"""Pytest Configuration for EcoSort Tests."""

from __future__ import annotations

import base64
import json
from typing import Any

import pytest

from ecosort.application.classify.ports.prompt_repository import PromptRepositoryPort
from ecosort.application.history.ports.history_repository import HistoryRepositoryPort
from ecosort.domain.value_objects import ScanRecord

# ============================================================
# Mock Implementations
# ============================================================


class MockPromptRepository(PromptRepositoryPort):
    """Mock Prompt Repository for testing."""

    def get_prompt(self, name: str) -> str:
        return "Classify the waste. category: one of [{{CATEGORY_LABELS}}]"

    def get_tip_articles(self) -> dict[str, Any]:
        return {
            "articles": [
                {
                    "id": "1",
                    "title": "Composting Basics",
                    "category": "Organic",
                    "summary": "Start a compost bin.",
                    "content": "Worm bins work great in small spaces.",
                }
            ],
            "featured_fact": {"title": "Did you know?", "text": "Cans save energy."},
        }


class MockHistoryRepository(HistoryRepositoryPort):
    """In-memory History Repository for testing."""

    def __init__(self, limit: int = 20):
        self.records: list[ScanRecord] = []
        self.limit = limit

    async def add(self, record: ScanRecord) -> None:
        self.records.insert(0, record)
        del self.records[self.limit :]

    async def list_all(self) -> list[ScanRecord]:
        return list(self.records)

    async def delete(self, scan_id: str) -> bool:
        for record in self.records:
            if record.id == scan_id:
                self.records.remove(record)
                return True
        return False

    async def clear(self) -> None:
        self.records.clear()


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def prompt_repository() -> MockPromptRepository:
    return MockPromptRepository()


@pytest.fixture
def history_repository() -> MockHistoryRepository:
    return MockHistoryRepository()


@pytest.fixture
def jpeg_base64() -> str:
    """JPEG 헤더로 시작하는 최소 바이트의 base64."""
    return base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg-bytes").decode("ascii")


@pytest.fixture
def apple_core_payload() -> dict[str, Any]:
    """단일 아이템 응답."""
    return {
        "items": [
            {
                "itemName": "Apple Core",
                "material": "Organic",
                "category": "compostable organic",
                "confidence": 0.92,
                "disposalInstruction": "Compost it.",
                "recyclingTips": ["Add to compost bin"],
                "funFact": "Decomposes in 2 months",
            }
        ]
    }


@pytest.fixture
def apple_core_response(apple_core_payload) -> str:
    return json.dumps(apple_core_payload)


@pytest.fixture
def mixed_items_response() -> str:
    """여러 아이템 + 코드 펜스."""
    body = {
        "items": [
            {
                "itemName": "Plastic Water Bottle",
                "material": "Plastic",
                "category": "Recyclable",
                "confidence": 0.88,
                "disposalInstruction": "Rinse and place in the recycling bin.",
                "recyclingTips": ["Remove the cap", "Crush to save space"],
            },
            {
                "itemName": "AA Battery",
                "material": "Metal",
                "category": "Hazardous",
                "confidence": 0.81,
                "disposalInstruction": "Take to a battery drop-off point.",
                "recyclingTips": ["Tape the terminals"],
                "funFact": "Batteries can leak heavy metals.",
            },
        ]
    }
    return f"```json\n{json.dumps(body, indent=2)}\n```"
