"""
BM25 (Best Match 25) lexical relevance ranking for article search.

Components:
- tokenizer: lowercase tokenization and the stopword list
- index_builder: per-call inverted index and average document length
- scorer: BM25 with collection IDF and title/subtitle/tag field boosts
- search: adapter from article records to ranked search results

The index is rebuilt on every call; nothing is cached between calls.
"""

from .tokenizer import STOPWORDS, is_stopword, tokenize
from .index_builder import average_document_length, build_inverted_index
from .scorer import BM25Scorer, calculate_idf, rank_documents_with_bm25, term_frequency
from .search import article_to_document, search_articles_with_bm25

__all__ = [
    "STOPWORDS",
    "is_stopword",
    "tokenize",
    "build_inverted_index",
    "average_document_length",
    "BM25Scorer",
    "calculate_idf",
    "term_frequency",
    "rank_documents_with_bm25",
    "article_to_document",
    "search_articles_with_bm25",
]
