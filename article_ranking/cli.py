"""
Command line interface: rank a JSON snapshot of articles.

Usage:
    article-ranking --articles articles.json search "rust memory"
    article-ranking --articles articles.json related ARTICLE_ID --limit 5
    article-ranking --articles articles.json trending --period WEEK
    article-ranking --articles articles.json for-user --read ID1 --read ID2

The articles file holds a JSON array of article objects (camelCase or
snake_case keys). Results are printed to stdout as JSON.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .bm25 import search_articles_with_bm25
from .config import RankingSettings, load_settings
from .logging_config import setup_logging
from .models import Article, ensure_articles
from .recommendations import get_related_articles, get_user_recommendations
from .trending import TrendingPeriod, get_trending_articles_by_period, rank_trending_articles

logger = logging.getLogger(__name__)


def load_articles(path: str) -> List[Article]:
    """
    Read and validate an articles snapshot.

    Raises:
        ValueError: file is not a JSON array of valid articles
        OSError: file cannot be read
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of articles in {path}, got {type(data).__name__}")

    articles = ensure_articles(data)
    logger.info(f"Loaded {len(articles)} articles from {path}")
    return articles


def _search(args, articles: List[Article], settings: RankingSettings) -> List[Dict[str, Any]]:
    results = search_articles_with_bm25(args.query, articles, settings.bm25)
    return [
        {"id": result.article.id, "title": result.article.title, "score": result.score}
        for result in results[:args.limit]
    ]


def _related(args, articles: List[Article], settings: RankingSettings) -> List[Dict[str, Any]]:
    related = get_related_articles(args.article_id, articles, args.limit, settings.recommendations)
    return [
        rec.model_dump(mode="json", include={"id", "title", "similarity_score", "shared_tags"})
        for rec in related
    ]


def _trending(args, articles: List[Article], settings: RankingSettings) -> List[Dict[str, Any]]:
    if args.period is not None:
        trending = get_trending_articles_by_period(articles, args.period, args.limit, settings.trending)
    else:
        filters = settings.trending_filters
        if args.logarithmic:
            filters = filters.model_copy(update={"use_logarithmic_decay": True})
        trending = rank_trending_articles(articles, filters, args.limit, settings.trending)

    return [
        article.model_dump(
            mode="json",
            include={"id", "title", "hot_score", "engagement_score", "time_decay"},
        )
        for article in trending
    ]


def _for_user(args, articles: List[Article], settings: RankingSettings) -> List[Dict[str, Any]]:
    by_id = {article.id: article for article in articles}
    missing = [article_id for article_id in args.read if article_id not in by_id]
    if missing:
        logger.warning(f"Read articles not in snapshot, ignored: {missing}")

    read_articles = [by_id[article_id] for article_id in args.read if article_id in by_id]
    recommendations = get_user_recommendations(read_articles, articles, args.limit, settings.recommendations)
    return [
        rec.model_dump(mode="json", include={"id", "title", "similarity_score", "shared_tags"})
        for rec in recommendations
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article-ranking",
        description="Rank a JSON snapshot of articles by search relevance, similarity or trendiness.",
    )
    parser.add_argument("--articles", required=True, help="Path to a JSON array of articles")
    parser.add_argument("--env-file", default=None, help="dotenv file with RANKING_* overrides")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Console log level (default: LOG_LEVEL env var or WARNING)",
    )
    parser.add_argument("--log-file", default=None, help="Base path for detailed session logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="BM25 search")
    search.add_argument("query")
    search.add_argument("--limit", type=int, default=20)
    search.set_defaults(handler=_search)

    related = subparsers.add_parser("related", help="Articles related to one article")
    related.add_argument("article_id")
    related.add_argument("--limit", type=int, default=5)
    related.set_defaults(handler=_related)

    trending = subparsers.add_parser("trending", help="Trending articles by hot score")
    trending.add_argument(
        "--period",
        default=None,
        choices=[period.value for period in TrendingPeriod],
        type=str.upper,
        help="Preset window; without it the RANKING_TRENDING_FILTERS_* settings apply",
    )
    trending.add_argument("--limit", type=int, default=20)
    trending.add_argument("--logarithmic", action="store_true", help="Use logarithmic time decay")
    trending.set_defaults(handler=_trending)

    for_user = subparsers.add_parser("for-user", help="Recommendations from a reading history")
    for_user.add_argument(
        "--read",
        action="append",
        required=True,
        help="Id of a read article, most recent first (repeatable)",
    )
    for_user.add_argument("--limit", type=int, default=10)
    for_user.set_defaults(handler=_for_user)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    console_level = getattr(logging, str(args.log_level).upper(), logging.WARNING)
    setup_logging(log_file=args.log_file, console_level=console_level)

    try:
        settings = load_settings(args.env_file)
        articles = load_articles(args.articles)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = args.handler(args, articles, settings)
    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
