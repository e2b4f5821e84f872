"""
Content-based recommendations: reference article and reading-history entry points.

Pipeline for one reference article:
1. Drop the reference itself and excluded ids
2. Weighted Jaccard similarity against the reference (corpus = all candidates)
3. Recency decay on the similarity
4. Keep candidates with similarity > 0 and at least one shared tag
5. Sort by decayed similarity, then diversity-aware top-K selection

shared_tags on the returned records are sorted by name.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Union

from ..config import RecommendationConfig, resolve_config
from ..models import ArticleLike, RecommendedArticle, decorate, ensure_article, ensure_articles
from ..utils import days_since, utc_now
from .diversity import select_diverse
from .similarity import apply_recency_decay, weighted_jaccard

logger = logging.getLogger(__name__)


def get_content_based_recommendations(
    current_article: ArticleLike,
    candidate_articles: List[ArticleLike],
    exclude_article_ids: Optional[Iterable[str]] = None,
    limit: int = 10,
    config: Union[RecommendationConfig, Dict, None] = None,
    now: Optional[datetime] = None,
) -> List[RecommendedArticle]:
    """
    Get content-based recommendations for an article.

    Args:
        current_article: The reference article
        candidate_articles: All candidate articles; also the corpus for tag rarity
        exclude_article_ids: Article ids to leave out (e.g. already read)
        limit: Maximum number of recommendations
        config: RecommendationConfig, dict of overrides, or None for defaults
        now: Reference instant for recency decay (default: current UTC time)

    Returns:
        New RecommendedArticle records sorted by similarity_score (descending)
    """
    config = resolve_config(config, RecommendationConfig)
    now = now or utc_now()

    reference = ensure_article(current_article)
    corpus = ensure_articles(candidate_articles)
    excluded = set(exclude_article_ids or ())

    candidates = [
        article for article in corpus
        if article.id != reference.id and article.id not in excluded
    ]

    recommendations = []
    for article in candidates:
        result = weighted_jaccard(reference, article, corpus, config)
        final_similarity = apply_recency_decay(result.similarity, article.created_at, now, config)

        if final_similarity > 0 and result.shared_tags:
            recommendations.append(decorate(
                RecommendedArticle,
                article,
                similarity_score=final_similarity,
                shared_tags=sorted(result.shared_tags),
            ))

    ranked = sorted(recommendations, key=lambda rec: rec.similarity_score, reverse=True)
    selected = select_diverse(ranked, limit)

    logger.debug(
        f"Recommendations for {reference.id}: {len(candidates)} candidates, "
        f"{len(ranked)} with shared tags, {len(selected)} selected"
    )
    return selected


def get_user_recommendations(
    user_read_articles: List[ArticleLike],
    all_articles: List[ArticleLike],
    limit: int = 10,
    config: Union[RecommendationConfig, Dict, None] = None,
    now: Optional[datetime] = None,
) -> List[RecommendedArticle]:
    """
    Get recommendations for a user based on their reading history.

    The first `history_seed_count` (5) read articles are used as seeds, so
    callers pass the history most recent first. Candidates are restricted to
    articles created within `history_window_days` (365) and never include
    anything the user has read. Per candidate, the best similarity across
    seeds is kept.

    Args:
        user_read_articles: Articles the user has read, most recent first
        all_articles: All available articles
        limit: Maximum number of recommendations (also per seed)
        config: RecommendationConfig, dict of overrides, or None for defaults
        now: Reference instant for the window and decay (default: current UTC time)

    Returns:
        RecommendedArticle records sorted by similarity_score (descending)
    """
    if not user_read_articles:
        return []

    config = resolve_config(config, RecommendationConfig)
    now = now or utc_now()

    read_articles = ensure_articles(user_read_articles)
    read_ids = [article.id for article in read_articles]

    recent_articles = [
        article for article in ensure_articles(all_articles)
        if days_since(article.created_at, now) <= config.history_window_days
    ]

    best: Dict[str, RecommendedArticle] = {}

    for read_article in read_articles[:config.history_seed_count]:
        recommendations = get_content_based_recommendations(
            read_article,
            recent_articles,
            read_ids,
            limit,
            config,
            now,
        )

        for rec in recommendations:
            existing = best.get(rec.id)
            if existing is None or rec.similarity_score > existing.similarity_score:
                best[rec.id] = rec

    ranked = sorted(best.values(), key=lambda rec: rec.similarity_score, reverse=True)

    logger.debug(
        f"User recommendations: {len(read_articles)} read, {len(recent_articles)} recent candidates, "
        f"{len(best)} merged"
    )
    return ranked[:limit]


def get_related_articles(
    article_id: str,
    articles: List[ArticleLike],
    limit: int = 5,
    config: Union[RecommendationConfig, Dict, None] = None,
    now: Optional[datetime] = None,
) -> List[RecommendedArticle]:
    """
    Related articles for the article with `article_id` within `articles`.

    Returns an empty list when the id is not part of the collection.
    """
    corpus = ensure_articles(articles)
    reference = next((article for article in corpus if article.id == article_id), None)

    if reference is None:
        logger.debug(f"Related articles: {article_id} not in collection of {len(corpus)}")
        return []

    return get_content_based_recommendations(reference, corpus, limit=limit, config=config, now=now)
