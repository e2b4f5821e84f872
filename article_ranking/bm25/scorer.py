"""
BM25 scorer with collection-wide IDF and field boosting.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.

Formula:
    score(term, doc) = idf × (tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl))
    idf(term) = ln((N - n + 0.5) / (n + 0.5))

Where:
    tf = term frequency in document
    k1 = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    dl = document length (number of tokens)
    avgdl = average document length across the collection
    N = number of documents, n = number of documents containing the term

Terms with idf <= 0 (present in half the collection or more) are skipped.

Field Boosting:
    Each term score is multiplied by the first matching field boost
    (case-insensitive substring): title 2.0, else subtitle 1.5, else tag name 1.3
"""

import logging
import math
from typing import Dict, List, Union

from ..config import BM25Config, resolve_config
from ..models import Document, ScoredDocument
from .index_builder import InvertedIndex, average_document_length, build_inverted_index
from .tokenizer import is_stopword, tokenize

logger = logging.getLogger(__name__)


def calculate_idf(term: str, document_count: int, index: InvertedIndex) -> float:
    """
    Inverse document frequency of a term.

    Returns 0.0 for terms absent from the index.
    """
    n = len(index.get(term, ()))
    if n == 0:
        return 0.0

    return math.log((document_count - n + 0.5) / (n + 0.5))


def term_frequency(term: str, tokens: List[str]) -> int:
    """Number of tokens exactly equal to term."""
    return sum(1 for token in tokens if token == term)


class BM25Scorer:
    """
    BM25 scoring over one document collection.

    Collection statistics (inverted index, average length) are computed in
    __init__ and treated as read-only afterwards, so score() may be called
    for each document independently.
    """

    def __init__(
        self,
        documents: List[Document],
        config: Union[BM25Config, Dict, None] = None,
    ):
        """
        Build collection statistics.

        Args:
            documents: The full collection (defines N, document frequencies, avgdl)
            config: BM25Config, dict of overrides, or None for defaults
        """
        self.config = resolve_config(config, BM25Config)
        self.document_count = len(documents)
        self.index = build_inverted_index(documents)
        self.avgdl = average_document_length(documents)

    def idf(self, term: str) -> float:
        return calculate_idf(term, self.document_count, self.index)

    def field_boost(self, term: str, document: Document) -> float:
        """Boost for the most important field containing term."""
        if document.title and term in document.title.lower():
            return self.config.title_boost
        if document.subtitle and term in document.subtitle.lower():
            return self.config.subtitle_boost
        if document.tags and any(term in tag.lower() for tag in document.tags):
            return self.config.tag_boost
        return 1.0

    def score(self, query_terms: List[str], document: Document) -> float:
        """
        Compute BM25 score for a document given query terms.

        Args:
            query_terms: Tokenized query (duplicates count once per occurrence)
            document: Document from the collection this scorer was built on

        Returns:
            BM25 score (higher = more relevant), 0.0 when nothing matches
        """
        if not query_terms or self.avgdl <= 0:
            return 0.0

        k1 = self.config.k1
        b = self.config.b
        doc_tokens = tokenize(document.text)
        doc_length = len(doc_tokens)

        score = 0.0

        for term in query_terms:
            if is_stopword(term):
                continue

            idf = self.idf(term)
            if idf <= 0:
                continue

            tf = term_frequency(term, doc_tokens)

            numerator = tf * (k1 + 1)
            denominator = tf + k1 * (1 - b + b * (doc_length / self.avgdl))
            term_score = idf * numerator / denominator

            score += term_score * self.field_boost(term, document)

        return score


def _with_score(document: Document, score: float) -> ScoredDocument:
    return ScoredDocument(
        id=document.id,
        text=document.text,
        title=document.title,
        subtitle=document.subtitle,
        tags=document.tags,
        score=score,
    )


def rank_documents_with_bm25(
    query: str,
    documents: List[Document],
    config: Union[BM25Config, Dict, None] = None,
) -> List[ScoredDocument]:
    """
    Rank documents by BM25 relevance to a free-text query.

    Args:
        query: Search query string
        documents: Documents to search (not mutated)
        config: BM25Config, dict of overrides, or None for defaults

    Returns:
        List of ScoredDocument sorted by score (descending). Documents scoring
        0 are dropped; equal scores keep their input order.
        An empty query or empty collection returns every document with score 0.
    """
    if not query.strip() or not documents:
        return [_with_score(document, 0.0) for document in documents]

    scorer = BM25Scorer(documents, config)
    query_terms = tokenize(query)

    scored = [
        _with_score(document, scorer.score(query_terms, document))
        for document in documents
    ]
    ranked = sorted(
        (document for document in scored if document.score > 0),
        key=lambda document: document.score,
        reverse=True,
    )

    logger.debug(
        f"BM25 ranked {len(ranked)}/{len(documents)} documents for query terms {query_terms}"
    )
    return ranked
