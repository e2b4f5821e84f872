"""
Article ranking algorithms: search, recommendations and trending.

Three independent scorers over the same Article view:
- bm25/: lexical relevance of articles to a free-text query
- recommendations/: tag similarity to a reference article or reading history
- trending/: time-decayed popularity (hot score)

All scorers are pure: they take an in-memory collection, never mutate it,
never cache, and return new decorated records.
"""

from .config import (
    BM25Config,
    RankingSettings,
    RecommendationConfig,
    TrendingConfig,
    TrendingFilters,
    load_settings,
)
from .models import (
    Article,
    Document,
    RecommendedArticle,
    ScoredDocument,
    SearchResult,
    Tag,
    TrendingArticle,
    ensure_articles,
)
from .bm25 import rank_documents_with_bm25, search_articles_with_bm25, tokenize
from .recommendations import (
    get_content_based_recommendations,
    get_related_articles,
    get_user_recommendations,
)
from .trending import (
    TrendingPeriod,
    calculate_hot_score,
    get_trending_articles_by_period,
    rank_trending_articles,
)

__version__ = "0.1.0"

__all__ = [
    "BM25Config",
    "RankingSettings",
    "RecommendationConfig",
    "TrendingConfig",
    "TrendingFilters",
    "load_settings",
    "Article",
    "Document",
    "RecommendedArticle",
    "ScoredDocument",
    "SearchResult",
    "Tag",
    "TrendingArticle",
    "ensure_articles",
    "tokenize",
    "rank_documents_with_bm25",
    "search_articles_with_bm25",
    "get_content_based_recommendations",
    "get_related_articles",
    "get_user_recommendations",
    "TrendingPeriod",
    "calculate_hot_score",
    "get_trending_articles_by_period",
    "rank_trending_articles",
]
