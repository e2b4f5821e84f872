"""
Article search adapter around the BM25 ranker.

Turns article records (dicts or Article models) into indexable Documents
and maps ranked documents back to the original records by id.
"""

import logging
from typing import Dict, List, Union

from ..config import BM25Config
from ..models import Article, ArticleLike, Document, SearchResult, ensure_article
from .scorer import rank_documents_with_bm25

logger = logging.getLogger(__name__)


def article_to_document(article: Article) -> Document:
    """Indexable view: title, subtitle, sub content and content concatenated."""
    return Document(
        id=article.id,
        text=f"{article.title} {article.subtitle or ''} {article.sub_content or ''} {article.content or ''}",
        title=article.title,
        subtitle=article.subtitle,
        tags=article.tag_names,
    )


def search_articles_with_bm25(
    query: str,
    articles: List[ArticleLike],
    config: Union[BM25Config, Dict, None] = None,
) -> List[SearchResult]:
    """
    Search and rank articles with BM25.

    Args:
        query: Search query
        articles: Articles to search through (dicts or Article models, not mutated)
        config: BM25Config, dict of overrides, or None for defaults

    Returns:
        SearchResult(article, score) in ranking order, where `article` is the
        original record as supplied. Same empty-query/empty-collection
        pass-through as rank_documents_with_bm25.

    Example:
        >>> results = search_articles_with_bm25("rust memory", articles)
        >>> [r.article["id"] for r in results]
        ['a']
    """
    originals: Dict[str, ArticleLike] = {}
    documents = []
    for item in articles:
        article = ensure_article(item)
        originals.setdefault(article.id, item)
        documents.append(article_to_document(article))

    ranked = rank_documents_with_bm25(query, documents, config)

    logger.debug(f"Search '{query}': {len(ranked)} of {len(articles)} articles ranked")

    return [SearchResult(article=originals[document.id], score=document.score) for document in ranked]
