"""
Hot score: engagement magnitude combined with time decay (Reddit-style "hot").

hot = ln(1 + likes×2 + comments×3 + reads×1) × decay
      × 1.1 if the author is verified
      × (1 + (quality - 70) / 10 × 0.05) if quality > 70

decay is exponential (exp(-days/7)) by default, or logarithmic
(1 / (1 + hours/12) ** 1.8).
"""

import math
from datetime import datetime
from typing import Dict, Optional, Union

from ..config import TrendingConfig, resolve_config
from ..models import Article, ArticleLike, TrendingArticle, decorate, ensure_article
from ..utils import days_since, hours_since, natural_log


def calculate_engagement_score(
    article: Article,
    config: Union[TrendingConfig, Dict, None] = None,
) -> float:
    """Logarithmically scaled weighted engagement."""
    config = resolve_config(config, TrendingConfig)
    engagement = (
        article.likes_count * config.like_weight
        + article.comments_count * config.comment_weight
        + article.read_count * config.read_weight
    )
    return natural_log(1 + engagement)


def calculate_exponential_decay(
    created_at: Optional[datetime],
    decay_constant_days: float = 7.0,
    now: Optional[datetime] = None,
) -> float:
    """
    Exponential time decay: exp(-days_old / decay_constant_days).

    Returns 1.0 for a brand-new article, approaching 0 with age.
    Far-future timestamps overflow to inf.
    """
    try:
        return math.exp(-days_since(created_at, now) / decay_constant_days)
    except OverflowError:
        return math.inf


def calculate_logarithmic_decay(
    created_at: Optional[datetime],
    gravity: float = 1.8,
    now: Optional[datetime] = None,
    gravity_hours: float = 12.0,
) -> float:
    """
    Logarithmic time decay: 1 / (1 + hours_old / 12) ** gravity.

    Higher gravity makes articles fall off faster. A created_at more than
    gravity_hours in the future has no real decay and yields NaN.
    """
    base = 1 + hours_since(created_at, now) / gravity_hours
    if base < 0:
        return math.nan
    if base == 0:
        return math.inf
    return 1 / math.pow(base, gravity)


def calculate_hot_score(
    article: ArticleLike,
    use_logarithmic: bool = False,
    config: Union[TrendingConfig, Dict, None] = None,
    now: Optional[datetime] = None,
) -> TrendingArticle:
    """
    Calculate the hot score for one article.

    Args:
        article: Article (dict or model) to score, not mutated
        use_logarithmic: Use logarithmic instead of exponential decay
        config: TrendingConfig, dict of overrides, or None for defaults
        now: Reference instant (default: current UTC time)

    Returns:
        New TrendingArticle with hot_score, engagement_score and time_decay
    """
    config = resolve_config(config, TrendingConfig)
    article = ensure_article(article)

    engagement_score = calculate_engagement_score(article, config)

    if use_logarithmic:
        time_decay = calculate_logarithmic_decay(
            article.created_at, config.gravity, now, config.gravity_hours
        )
    else:
        time_decay = calculate_exponential_decay(article.created_at, config.decay_constant_days, now)

    hot_score = engagement_score * time_decay

    if article.author_verified:
        hot_score *= config.verified_boost

    if article.quality_score is not None and article.quality_score > config.quality_threshold:
        quality_boost = 1 + (
            (article.quality_score - config.quality_threshold) / config.quality_step
        ) * config.quality_step_boost
        hot_score *= quality_boost

    return decorate(
        TrendingArticle,
        article,
        hot_score=hot_score,
        engagement_score=engagement_score,
        time_decay=time_decay,
    )
