"""HTTP API 통합 테스트.

외부 의존성(Vision 모델, Redis)은 dependency_overrides로 대체합니다.
"""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from ecosort.application.classify.ports.vision_model import VisionModelPort
from ecosort.application.classify.services import ClassificationService
from ecosort.domain.exceptions import HistoryUnavailableError
from ecosort.main import create_app
from ecosort.setup.dependencies import (
    get_classification_service_factory,
    get_history_repository,
    get_prompt_repository,
)


class StubVisionModel(VisionModelPort):
    """고정 응답(또는 예외)을 반환하는 Vision 모델."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = 0

    async def generate(self, request) -> str | None:
        self.calls += 1
        if self.error:
            raise self.error
        return self.text


def _build_service(vision_model, prompt_repository, api_key):
    return ClassificationService(
        vision_model_factory=lambda key: vision_model,
        api_key_resolver=lambda: api_key,
        prompt_repository=prompt_repository,
    )


@pytest.fixture
def vision_model() -> StubVisionModel:
    return StubVisionModel()


@pytest.fixture
def api_key() -> dict:
    return {"value": "test-key"}


@pytest.fixture
def app(vision_model, prompt_repository, history_repository, api_key):
    application = create_app()

    def service_factory(model=None):
        return _build_service(vision_model, prompt_repository, api_key["value"])

    application.dependency_overrides[get_classification_service_factory] = (
        lambda: service_factory
    )
    application.dependency_overrides[get_history_repository] = lambda: history_repository
    application.dependency_overrides[get_prompt_repository] = lambda: prompt_repository
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_ready_without_api_key(self, client):
        assert client.get("/ready").json() == {"status": "ready"}


class TestScanEndpoint:
    """POST /api/v1/scan 테스트."""

    def test_scan_success_records_history(
        self, client, vision_model, history_repository, jpeg_base64, mixed_items_response
    ):
        vision_model.text = mixed_items_response

        response = client.post(
            "/api/v1/scan",
            json={"image": f"data:image/jpeg;base64,{jpeg_base64}"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"]
        assert isinstance(body["timestamp"], int)
        assert [item["itemName"] for item in body["items"]] == [
            "Plastic Water Bottle",
            "AA Battery",
        ]
        assert body["items"][0]["category"] == "Recyclable"
        assert body["items"][0]["recyclingTips"] == ["Remove the cap", "Crush to save space"]
        # funFact 미제공 아이템은 필드 자체가 없음
        assert "funFact" not in body["items"][0]
        assert body["items"][1]["funFact"] == "Batteries can leak heavy metals."

        assert len(history_repository.records) == 1
        assert history_repository.records[0].id == body["id"]
        assert vision_model.calls == 1

    def test_scan_normalizes_category(self, client, vision_model, jpeg_base64, apple_core_response):
        vision_model.text = apple_core_response

        response = client.post("/api/v1/scan", json={"image": jpeg_base64})

        item = response.json()["items"][0]
        assert item["category"] == "Biodegradable"
        assert item["confidence"] == pytest.approx(0.92)

    def test_scan_empty_items_is_success(self, client, vision_model, history_repository, jpeg_base64):
        vision_model.text = json.dumps({"items": []})

        response = client.post("/api/v1/scan", json={"image": jpeg_base64})

        assert response.status_code == 200
        assert response.json()["items"] == []
        assert len(history_repository.records) == 1

    def test_unparseable_response_is_502(self, client, vision_model, history_repository, jpeg_base64):
        vision_model.text = "I think this is a banana."

        response = client.post("/api/v1/scan", json={"image": jpeg_base64})

        assert response.status_code == 502
        body = response.json()
        assert body["code"] == "CLASSIFICATION_FAILED"
        assert body["kind"] == "format"
        assert body["detail"] == "Failed to analyze the image. Please try again."
        assert history_repository.records == []

    def test_upstream_failure_is_502(self, client, vision_model, history_repository, jpeg_base64):
        vision_model.error = RuntimeError("quota exceeded")

        response = client.post("/api/v1/scan", json={"image": jpeg_base64})

        assert response.status_code == 502
        assert response.json()["kind"] == "upstream"
        assert "quota" not in response.json()["detail"]
        assert history_repository.records == []

    def test_missing_api_key_is_503(
        self, client, vision_model, history_repository, api_key, jpeg_base64
    ):
        api_key["value"] = None

        response = client.post("/api/v1/scan", json={"image": jpeg_base64})

        assert response.status_code == 503
        assert response.json()["kind"] == "configuration"
        assert vision_model.calls == 0
        assert history_repository.records == []

    def test_invalid_image_is_400(self, client, vision_model):
        response = client.post("/api/v1/scan", json={"image": "not base64 !!!"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_IMAGE"
        assert vision_model.calls == 0

    def test_empty_image_is_rejected(self, client):
        response = client.post("/api/v1/scan", json={"image": ""})

        assert response.status_code == 422

    def test_unsupported_model_is_400(self, app, jpeg_base64):
        app.dependency_overrides.pop(get_classification_service_factory)

        with TestClient(app) as test_client:
            response = test_client.post(
                "/api/v1/scan",
                json={"image": jpeg_base64, "model": "unknown-model"},
            )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "UNSUPPORTED_MODEL"
        assert "gemini-3-flash-preview" in body["detail"]["supported_models"]

    def test_categories(self, client):
        response = client.get("/api/v1/scan/categories")

        assert response.status_code == 200
        names = [c["name"] for c in response.json()]
        assert names == ["Biodegradable", "Recyclable", "Non-Recyclable", "Hazardous", "E-Waste"]
        assert response.json()[0]["color"] == "#86efac"


class TestHistoryEndpoints:
    """/api/v1/scan/history 테스트."""

    @pytest.fixture
    def scanned(self, client, vision_model, jpeg_base64, mixed_items_response, apple_core_response):
        """두 번 스캔한 후의 응답 목록 (오래된 순)."""
        vision_model.text = mixed_items_response
        first = client.post("/api/v1/scan", json={"image": jpeg_base64}).json()
        vision_model.text = apple_core_response
        second = client.post("/api/v1/scan", json={"image": jpeg_base64}).json()
        return [first, second]

    def test_list_newest_first(self, client, scanned):
        response = client.get("/api/v1/scan/history")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [scanned[1]["id"], scanned[0]["id"]]

    def test_stats(self, client, scanned):
        response = client.get("/api/v1/scan/history/stats")

        body = response.json()
        assert body["totalItems"] == 3
        assert {c["name"]: c["value"] for c in body["categories"]} == {
            "Biodegradable": 1,
            "Recyclable": 1,
            "Hazardous": 1,
        }
        colors = {c["name"]: c["color"] for c in body["categories"]}
        assert colors["Hazardous"] == "#fca5a5"

    def test_stats_empty(self, client):
        body = client.get("/api/v1/scan/history/stats").json()

        assert body == {"totalItems": 0, "categories": []}

    def test_delete_one(self, client, scanned):
        response = client.delete(f"/api/v1/scan/history/{scanned[0]['id']}")

        assert response.status_code == 204
        remaining = client.get("/api/v1/scan/history").json()
        assert [r["id"] for r in remaining] == [scanned[1]["id"]]

    def test_delete_missing_is_404(self, client):
        response = client.delete("/api/v1/scan/history/does-not-exist")

        assert response.status_code == 404
        assert response.json()["code"] == "SCAN_NOT_FOUND"

    def test_clear(self, client, scanned):
        response = client.delete("/api/v1/scan/history")

        assert response.status_code == 204
        assert client.get("/api/v1/scan/history").json() == []


class TestTipsEndpoint:
    def test_tips(self, client):
        response = client.get("/api/v1/tips")

        assert response.status_code == 200
        body = response.json()
        assert body["articles"][0]["title"] == "Composting Basics"
        assert body["featured_fact"]["title"] == "Did you know?"


class TestHistoryUnavailable:
    """히스토리 저장소 장애 시 503."""

    @pytest.fixture
    def unavailable_client(self, app, history_repository):
        async def fail(*args, **kwargs):
            raise HistoryUnavailableError()

        history_repository.list_all = fail
        history_repository.delete = fail
        history_repository.clear = fail
        with TestClient(app) as test_client:
            yield test_client

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get", "/api/v1/scan/history"),
            ("get", "/api/v1/scan/history/stats"),
            ("delete", "/api/v1/scan/history"),
            ("delete", "/api/v1/scan/history/scan-1"),
        ],
    )
    def test_history_unavailable_is_503(self, unavailable_client, method, path):
        response = getattr(unavailable_client, method)(path)

        assert response.status_code == 503
        assert response.json()["code"] == "HISTORY_UNAVAILABLE"
