"""
Trending ranking: eligibility filters, hot scoring and period presets.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from ..config import TrendingConfig, TrendingFilters, resolve_config
from ..models import Article, ArticleLike, TrendingArticle, ensure_articles
from ..utils import days_since, utc_now
from .hot_score import calculate_hot_score

logger = logging.getLogger(__name__)


class TrendingPeriod(str, Enum):
    """Time window presets for trending lists."""

    ANY = "ANY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"

    @property
    def max_age_days(self) -> int:
        return {
            TrendingPeriod.WEEK: 7,
            TrendingPeriod.MONTH: 30,
            TrendingPeriod.YEAR: 365,
        }.get(self, 90)

    @classmethod
    def parse(cls, value: Union["TrendingPeriod", str, None]) -> "TrendingPeriod":
        """Period from enum or name (case-insensitive); unknown names mean ANY."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            logger.debug(f"Unknown trending period {value!r}, using ANY")
            return cls.ANY


def passes_filters(article: Article, filters: TrendingFilters, now: datetime) -> bool:
    """
    Eligibility check.

    Engagement: rejected only when likes < min_likes AND comments < min_comments.
    Age: rejected when max_age_days > 0 and the article is older than that.
    """
    if article.likes_count < filters.min_likes and article.comments_count < filters.min_comments:
        return False

    if filters.max_age_days > 0 and days_since(article.created_at, now) > filters.max_age_days:
        return False

    return True


def rank_trending_articles(
    articles: List[ArticleLike],
    filters: Union[TrendingFilters, Dict, None] = None,
    limit: int = 20,
    config: Union[TrendingConfig, Dict, None] = None,
    now: Optional[datetime] = None,
) -> List[TrendingArticle]:
    """
    Rank articles by hot score.

    Args:
        articles: Articles to rank (dicts or models, not mutated)
        filters: TrendingFilters, dict of overrides, or None for defaults
            (min_likes=1, min_comments=0, max_age_days=90, use_logarithmic_decay=False)
        limit: Maximum number of results
        config: TrendingConfig, dict of overrides, or None for defaults
        now: Reference instant (default: current UTC time)

    Returns:
        TrendingArticle records sorted by hot_score (descending)
    """
    filters = resolve_config(filters, TrendingFilters)
    config = resolve_config(config, TrendingConfig)
    now = now or utc_now()

    candidates = ensure_articles(articles)
    eligible = [article for article in candidates if passes_filters(article, filters, now)]

    scored = [
        calculate_hot_score(article, filters.use_logarithmic_decay, config, now)
        for article in eligible
    ]
    ranked = sorted(scored, key=lambda article: article.hot_score, reverse=True)

    logger.debug(f"Trending: {len(eligible)}/{len(candidates)} articles passed filters")
    return ranked[:limit]


def get_trending_articles_by_period(
    articles: List[ArticleLike],
    time_variant: Union[TrendingPeriod, str] = TrendingPeriod.ANY,
    limit: int = 20,
    config: Union[TrendingConfig, Dict, None] = None,
    now: Optional[datetime] = None,
) -> List[TrendingArticle]:
    """
    Trending articles for a period: WEEK (7 days), MONTH (30), YEAR (365), ANY (90).

    Uses min_likes=1, min_comments=0 and exponential decay.
    """
    period = TrendingPeriod.parse(time_variant)
    filters = TrendingFilters(
        min_likes=1,
        min_comments=0,
        max_age_days=period.max_age_days,
        use_logarithmic_decay=False,
    )
    return rank_trending_articles(articles, filters, limit, config, now)
