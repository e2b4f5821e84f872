"""
Trending articles using a time-decayed hot score.

Components:
- hot_score: engagement score, exponential/logarithmic decay, verified and quality boosts
- ranking: eligibility filters, ranking and period presets
"""

from .hot_score import (
    calculate_engagement_score,
    calculate_exponential_decay,
    calculate_hot_score,
    calculate_logarithmic_decay,
)
from .ranking import (
    TrendingPeriod,
    get_trending_articles_by_period,
    passes_filters,
    rank_trending_articles,
)

__all__ = [
    "calculate_engagement_score",
    "calculate_exponential_decay",
    "calculate_hot_score",
    "calculate_logarithmic_decay",
    "TrendingPeriod",
    "get_trending_articles_by_period",
    "passes_filters",
    "rank_trending_articles",
]
