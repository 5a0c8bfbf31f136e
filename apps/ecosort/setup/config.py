"""EcoSort Service Configuration.

외부화 원칙:
- 자주 바뀌는 정책(모델 목록, CORS) → env
- API Key → SecretStr (로깅 마스킹), 호출 시점에 다시 읽음
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# ==========================================
# 모델 → Provider 명시적 매핑 (추론 없음)
# ==========================================

MODEL_PROVIDER_MAP: dict[str, str] = {
    # === Gemini 계열 (Google) ===
    "gemini-3-pro-preview": "gemini",
    "gemini-3-flash-preview": "gemini",
    "gemini-2.5-pro": "gemini",
    "gemini-2.5-flash": "gemini",
    "gemini-2.5-flash-lite": "gemini",
    "gemini-2.0-flash": "gemini",
    # === GPT 계열 (OpenAI) ===
    "gpt-5.2": "gpt",
    "gpt-5.1": "gpt",
    "gpt-5": "gpt",
    "gpt-5-mini": "gpt",
}

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseSettings):
    """EcoSort 설정.

    운영 환경에서는 반드시 env로 주입할 것.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Service Identity ===
    service_name: str = Field("ecosort-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")

    # === Logging ===
    log_level: str = Field("INFO", description="Root log level")
    log_format: str = Field("json", description="json (ECS) | text")

    # === CORS ===
    cors_origins_raw: str = Field(
        DEFAULT_CORS_ORIGINS,
        validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins"),
        description="쉼표로 구분된 허용 Origin 목록",
    )

    # === Redis (스캔 히스토리) ===
    redis_url: str = Field(
        "redis://localhost:6379/0",
        description="Redis URL. prod에서는 env 필수.",
    )
    history_key_prefix: str = Field("ecosort", description="히스토리 Redis 키 prefix")
    history_limit: int = Field(20, ge=1, le=200, description="히스토리 최대 보관 개수")

    # === LLM API Keys (SecretStr로 로깅 마스킹, 없어도 기동) ===
    gemini_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
        description="Gemini API Key",
    )
    openai_api_key: SecretStr | None = Field(
        None,
        validation_alias=AliasChoices("OPENAI_API_KEY"),
        description="OpenAI API Key",
    )

    # === LLM 모델 정책 ===
    llm_default_model: str = Field(
        "gemini-3-flash-preview",
        description="기본 Vision 모델명 (클라이언트 미지정 시)",
    )
    structured_output: bool = Field(
        True,
        description="JSON 스키마 기반 구조화 출력 사용 여부",
    )

    # === Resources ===
    @property
    def assets_path(self) -> str:
        """정적 에셋 경로 (prompts, data)."""
        return str(Path(__file__).parent.parent / "infrastructure" / "assets")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins_raw.split(",") if origin.strip()]

    # ==========================================
    # Public Methods (명시적 매핑 기반)
    # ==========================================

    def resolve_provider(self, model: str) -> str:
        """모델 → provider 매핑 (명시적).

        Args:
            model: Vision 모델명

        Returns:
            provider (gemini, gpt)

        Raises:
            KeyError: 지원하지 않는 모델
        """
        if model not in MODEL_PROVIDER_MAP:
            raise KeyError(
                f"Unknown model: '{model}'. " f"Supported: {list(MODEL_PROVIDER_MAP.keys())}"
            )
        return MODEL_PROVIDER_MAP[model]

    def validate_model(self, model: str) -> bool:
        """Vision + Structured JSON 지원 모델인지 검증."""
        return model in MODEL_PROVIDER_MAP

    def get_supported_models(self, provider: str | None = None) -> list[str]:
        """지원 모델 목록 반환.

        Args:
            provider: 특정 provider만 필터 (None이면 전체)

        Returns:
            지원 모델 목록
        """
        if provider:
            return [m for m, p in MODEL_PROVIDER_MAP.items() if p == provider]
        return list(MODEL_PROVIDER_MAP.keys())

    def get_api_key(self, provider: str) -> str | None:
        """Provider별 API Key 반환 (SecretStr unwrap).

        Args:
            provider: gemini | gpt

        Returns:
            API Key 문자열 또는 None
        """
        secret = self.gemini_api_key if provider == "gemini" else self.openai_api_key
        if secret is None:
            return None
        return secret.get_secret_value() or None


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 (API Key 제외한 정적 설정용)."""
    return Settings()


def resolve_api_key(provider: str) -> str | None:
    """호출 시점의 API Key 조회.

    싱글톤을 쓰지 않고 env/.env를 매번 다시 읽으므로
    기동 이후 주입된 키도 반영됩니다.
    """
    return Settings().get_api_key(provider)
