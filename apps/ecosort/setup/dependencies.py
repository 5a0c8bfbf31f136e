"""Dependency Injection - FastAPI / Port-Adapter 조립."""

from __future__ import annotations

from functools import lru_cache, partial
from typing import Annotated, Callable

from fastapi import Depends

from ecosort.application.classify.ports.prompt_repository import PromptRepositoryPort
from ecosort.application.classify.ports.vision_model import VisionModelPort
from ecosort.application.classify.services import ClassificationService
from ecosort.application.history.ports.history_repository import HistoryRepositoryPort
from ecosort.application.history.services import HistoryService
from ecosort.application.tips.queries import GetTipsQuery
from ecosort.domain.exceptions import UnsupportedModelError
from ecosort.infrastructure.asset_loader import FilePromptRepository
from ecosort.infrastructure.llm import GeminiVisionAdapter, GPTVisionAdapter
from ecosort.infrastructure.persistence_redis import RedisHistoryRepository
from ecosort.setup.config import Settings, get_settings, resolve_api_key

ClassificationServiceFactory = Callable[[str | None], ClassificationService]

# ─────────────────────────────────────────────────────────────────────────────
# Singleton Port Instances
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache
def get_prompt_repository() -> PromptRepositoryPort:
    """PromptRepository 싱글톤."""
    settings = get_settings()
    return FilePromptRepository(assets_path=settings.assets_path)


@lru_cache
def get_history_repository() -> HistoryRepositoryPort:
    """HistoryRepository 싱글톤."""
    settings = get_settings()
    return RedisHistoryRepository(
        redis_url=settings.redis_url,
        limit=settings.history_limit,
        key_prefix=settings.history_key_prefix,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Factory Functions (per-request)
# ─────────────────────────────────────────────────────────────────────────────


def create_vision_model(model: str, api_key: str) -> VisionModelPort:
    """VisionModel 생성 (분류 호출마다 새로 생성).

    Args:
        model: 모델명 (MODEL_PROVIDER_MAP에 있어야 함)
        api_key: 호출 시점에 resolve된 API Key

    Returns:
        VisionModelPort 구현체
    """
    provider = get_settings().resolve_provider(model)
    if provider == "gemini":
        return GeminiVisionAdapter(model=model, api_key=api_key)
    return GPTVisionAdapter(model=model, api_key=api_key)


def get_classification_service(model: str | None = None) -> ClassificationService:
    """ClassificationService 생성.

    Args:
        model: 모델명 (None이면 기본값 사용)

    Returns:
        ClassificationService 인스턴스

    Raises:
        UnsupportedModelError: 지원하지 않는 모델인 경우
    """
    settings = get_settings()
    if model is None:
        model = settings.llm_default_model

    # 가드레일: 지원 모델 검증
    if not settings.validate_model(model):
        raise UnsupportedModelError(model, settings.get_supported_models())

    provider = settings.resolve_provider(model)

    return ClassificationService(
        vision_model_factory=partial(create_vision_model, model),
        api_key_resolver=partial(resolve_api_key, provider),
        prompt_repository=get_prompt_repository(),
        structured_output=settings.structured_output,
    )


def get_classification_service_factory() -> ClassificationServiceFactory:
    """요청 body의 model로 서비스를 만드는 팩토리 반환."""
    return get_classification_service


def get_history_service(
    repository: Annotated[HistoryRepositoryPort, Depends(get_history_repository)],
) -> HistoryService:
    """HistoryService 인스턴스 반환."""
    return HistoryService(repository=repository)


def get_tips_query(
    prompt_repository: Annotated[PromptRepositoryPort, Depends(get_prompt_repository)],
) -> GetTipsQuery:
    """GetTipsQuery 인스턴스 반환."""
    return GetTipsQuery(prompt_repository=prompt_repository)


# ─────────────────────────────────────────────────────────────────────────────
# Type Aliases for Dependency Injection
# ─────────────────────────────────────────────────────────────────────────────


SettingsDep = Annotated[Settings, Depends(get_settings)]
ClassificationServiceFactoryDep = Annotated[
    ClassificationServiceFactory,
    Depends(get_classification_service_factory),
]
HistoryServiceDep = Annotated[HistoryService, Depends(get_history_service)]
GetTipsQueryDep = Annotated[GetTipsQuery, Depends(get_tips_query)]
