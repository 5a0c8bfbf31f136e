"""Prompt Repository Port - 프롬프트/정적 에셋 로딩 추상화."""

from abc import ABC, abstractmethod
from typing import Any


class PromptRepositoryPort(ABC):
    """프롬프트 리포지토리 포트."""

    @abstractmethod
    def get_prompt(self, name: str) -> str:
        """프롬프트 템플릿 로딩.

        Args:
            name: 프롬프트 이름 (확장자 제외)

        Returns:
            프롬프트 템플릿 문자열
        """
        pass

    @abstractmethod
    def get_tip_articles(self) -> dict[str, Any]:
        """팁 아티클 YAML 로딩.

        Returns:
            {"articles": [...], "featured_fact": {...}}
        """
        pass
