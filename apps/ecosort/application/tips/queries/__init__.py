"""Tips Queries."""

from ecosort.application.tips.queries.get_tips import (
    FeaturedFact,
    GetTipsQuery,
    TipArticle,
    TipsResponse,
)

__all__ = ["FeaturedFact", "GetTipsQuery", "TipArticle", "TipsResponse"]
