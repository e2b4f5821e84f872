"""
Content-based article recommendations using weighted Jaccard similarity over tags.

Components:
- similarity: tag weights (TF-IDF × engagement), weighted Jaccard, recency decay
- diversity: top-K selection limiting repeated shared-tag combinations
- engine: reference-article, related-article and reading-history entry points
"""

from .similarity import (
    JaccardResult,
    apply_recency_decay,
    engagement_boost,
    tag_weight,
    weighted_jaccard,
)
from .diversity import select_diverse, tag_combination_key
from .engine import (
    get_content_based_recommendations,
    get_related_articles,
    get_user_recommendations,
)

__all__ = [
    "JaccardResult",
    "apply_recency_decay",
    "engagement_boost",
    "tag_weight",
    "weighted_jaccard",
    "select_diverse",
    "tag_combination_key",
    "get_content_based_recommendations",
    "get_related_articles",
    "get_user_recommendations",
]
