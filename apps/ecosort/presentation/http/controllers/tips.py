"""Tips API Controller."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from ecosort.setup.dependencies import GetTipsQueryDep

router = APIRouter(prefix="/tips", tags=["tips"])


class TipArticleResponse(BaseModel):
    id: str
    title: str
    category: str
    summary: str
    content: str


class FeaturedFactResponse(BaseModel):
    title: str
    text: str


class TipsResponse(BaseModel):
    articles: list[TipArticleResponse]
    featured_fact: FeaturedFactResponse | None = None


@router.get("", response_model=TipsResponse, summary="Sustainable living tips")
def get_tips(query: GetTipsQueryDep) -> TipsResponse:
    """재활용/업사이클링 팁 아티클을 반환합니다."""
    tips = query.execute()
    return TipsResponse(
        articles=[
            TipArticleResponse(
                id=article.id,
                title=article.title,
                category=article.category,
                summary=article.summary,
                content=article.content,
            )
            for article in tips.articles
        ],
        featured_fact=(
            FeaturedFactResponse(title=tips.featured_fact.title, text=tips.featured_fact.text)
            if tips.featured_fact
            else None
        ),
    )
