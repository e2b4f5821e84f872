"""
BM25 index builder - collection statistics for one scoring call.

The index is rebuilt from the supplied documents on every call and is never
updated or persisted. It must be complete before any document is scored,
since every score depends on collection-wide IDF statistics.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Set

from ..models import Document
from .tokenizer import is_stopword, tokenize

logger = logging.getLogger(__name__)

InvertedIndex = Dict[str, Set[str]]


def build_inverted_index(documents: List[Document]) -> InvertedIndex:
    """
    Build inverted index: term -> set of ids of documents containing the term.

    Each document contributes its unique, non-stopword tokens once.

    Args:
        documents: Documents to index

    Returns:
        Dict mapping term to the set of document ids containing it

    Example:
        >>> docs = [Document(id="a", text="Rust memory safety"),
        ...         Document(id="b", text="memory of the pasta")]
        >>> index = build_inverted_index(docs)
        >>> sorted(index["memory"])
        ['a', 'b']
        >>> "the" in index
        False
    """
    index: Dict[str, Set[str]] = defaultdict(set)

    for document in documents:
        for term in set(tokenize(document.text)):
            if not is_stopword(term):
                index[term].add(document.id)

    logger.debug(f"Built inverted index: {len(index)} unique terms from {len(documents)} documents")

    return dict(index)


def average_document_length(documents: List[Document]) -> float:
    """
    Mean token count of the indexed text across the collection.

    Stopwords count towards document length. Returns 0.0 for an empty collection.
    """
    if not documents:
        return 0.0

    total_length = sum(len(tokenize(document.text)) for document in documents)
    return total_length / len(documents)
