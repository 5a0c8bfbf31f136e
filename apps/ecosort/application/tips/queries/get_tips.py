"""Get Tips Query - 정적 팁 아티클 조회."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ecosort.application.classify.ports.prompt_repository import PromptRepositoryPort


@dataclass(frozen=True, slots=True)
class TipArticle:
    """팁 아티클."""

    id: str
    title: str
    category: str
    summary: str
    content: str


@dataclass(frozen=True, slots=True)
class FeaturedFact:
    """오늘의 사실 카드 (Did you know?)."""

    title: str
    text: str


@dataclass(frozen=True, slots=True)
class TipsResponse:
    articles: list[TipArticle]
    featured_fact: FeaturedFact | None = None


class GetTipsQuery:
    """팁 아티클 조회 Query.

    에셋 YAML에서 읽으며 외부 I/O 없음.
    """

    def __init__(self, prompt_repository: PromptRepositoryPort):
        self._assets = prompt_repository

    def execute(self) -> TipsResponse:
        data: dict[str, Any] = self._assets.get_tip_articles()

        articles = [
            TipArticle(
                id=str(article["id"]),
                title=article["title"],
                category=article["category"],
                summary=article["summary"],
                content=article["content"],
            )
            for article in data.get("articles", [])
        ]

        fact = data.get("featured_fact")
        featured = FeaturedFact(title=fact["title"], text=fact["text"]) if fact else None

        return TipsResponse(articles=articles, featured_fact=featured)
