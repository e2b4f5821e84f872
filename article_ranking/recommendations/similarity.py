"""
Tag similarity: weighted Jaccard over TF-IDF-like tag weights, plus recency decay.

weight(tag, article) = tf × idf × engagement_boost
    tf = 1 if the article has the tag, else 0
    idf = ln((|corpus| + 1) / (articles_with_tag + 1))
    engagement_boost = 1 + ln(1 + likes×0.3 + comments×0.5 + reads×0.2)

similarity(A, B) = Σ min(wA, wB) / Σ max(wA, wB) over the union of tag ids
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Union

from ..config import RecommendationConfig, resolve_config
from ..models import Article
from ..utils import days_since, natural_log


@dataclass
class JaccardResult:
    """Weighted Jaccard similarity and the names of tags both articles carry"""
    similarity: float
    shared_tags: List[str] = field(default_factory=list)


def engagement_boost(article: Article, config: Optional[RecommendationConfig] = None) -> float:
    """Engagement multiplier for an article's tag weights (>= 1 for non-negative counters)."""
    config = resolve_config(config, RecommendationConfig)
    engagement = (
        article.likes_count * config.like_weight
        + article.comments_count * config.comment_weight
        + article.read_count * config.read_weight
    )
    return 1 + natural_log(1 + engagement)


def tag_weight(
    tag_id: str,
    article: Article,
    corpus: List[Article],
    config: Union[RecommendationConfig, Dict, None] = None,
) -> float:
    """
    TF-IDF-like weight of a tag within an article, scaled by engagement.

    Args:
        tag_id: Tag identity
        article: Article the weight is computed for
        corpus: Collection defining tag rarity
        config: RecommendationConfig, dict of overrides, or None for defaults

    Returns:
        0.0 if the article lacks the tag, otherwise tf × idf × engagement boost
    """
    config = resolve_config(config, RecommendationConfig)

    tf = 1 if article.has_tag(tag_id) else 0
    if tf == 0:
        return 0.0

    articles_with_tag = sum(1 for other in corpus if other.has_tag(tag_id))
    idf = math.log((len(corpus) + 1) / (articles_with_tag + 1))

    return tf * idf * engagement_boost(article, config)


def weighted_jaccard(
    article_a: Article,
    article_b: Article,
    corpus: List[Article],
    config: Union[RecommendationConfig, Dict, None] = None,
) -> JaccardResult:
    """
    Weighted Jaccard similarity between two articles' tag sets.

    A tag is shared when its weight is positive in both articles; shared tag
    names are listed in union order (A's tags first, then B's).
    A zero max-sum (no tags, or only zero-weight tags) yields similarity 0.
    """
    config = resolve_config(config, RecommendationConfig)

    weights_a = {tag.id: tag_weight(tag.id, article_a, corpus, config) for tag in article_a.tags}
    weights_b = {tag.id: tag_weight(tag.id, article_b, corpus, config) for tag in article_b.tags}

    names: Dict[str, str] = {}
    for tag in article_b.tags:
        names.setdefault(tag.id, tag.name)
    for tag in article_a.tags:
        names[tag.id] = tag.name  # A's name wins for a shared id

    # dicts keep insertion order, so the union iterates deterministically
    all_tag_ids = list(dict.fromkeys(article_a.tag_ids + article_b.tag_ids))

    min_sum = 0.0
    max_sum = 0.0
    shared_tags = []

    for tag_id in all_tag_ids:
        weight_a = weights_a.get(tag_id, 0.0)
        weight_b = weights_b.get(tag_id, 0.0)

        min_sum += min(weight_a, weight_b)
        max_sum += max(weight_a, weight_b)

        if weight_a > 0 and weight_b > 0 and names.get(tag_id):
            shared_tags.append(names[tag_id])

    similarity = min_sum / max_sum if max_sum > 0 else 0.0

    return JaccardResult(similarity=similarity, shared_tags=shared_tags)


def apply_recency_decay(
    similarity: float,
    created_at: Optional[datetime],
    now: Optional[datetime] = None,
    config: Union[RecommendationConfig, Dict, None] = None,
) -> float:
    """
    Penalize older candidates: similarity × (1 - min(1, days_old / 365) × 0.2).

    The penalty grows linearly with age and is capped at 20% from one year on.
    """
    config = resolve_config(config, RecommendationConfig)

    days_old = days_since(created_at, now)
    age_factor = min(1.0, days_old / config.age_horizon_days) * config.max_age_penalty

    return similarity * (1 - age_factor)
