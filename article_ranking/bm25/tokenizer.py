"""
Tokenizer for BM25 text processing.

Tokenization pipeline:
1. Lowercase conversion
2. Replace every character that is not a word character or whitespace with a space
3. Split on whitespace runs
4. Drop tokens of length <= 2
5. Return the tokens in order (duplicates kept)

Stopwords are NOT removed here. Callers filter with STOPWORDS / is_stopword
where term significance matters (index construction, query terms).
"""

import re
from typing import List

# Common English function words ignored for ranking.
# Words of length <= 2 never survive tokenize() but are listed for completeness.
STOPWORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to',
    'for', 'of', 'with', 'by', 'from', 'as', 'is', 'was', 'are', 'were',
    'been', 'be', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'should', 'could', 'may', 'might', 'must', 'can', 'this', 'that', 'these', 'those',
    'i', 'you', 'he', 'she', 'it', 'we', 'they', 'what', 'which', 'who',
    'when', 'where', 'why', 'how',
])

MIN_TOKEN_LENGTH = 3

# ASCII word characters ([A-Za-z0-9_]) and whitespace survive, everything else splits
_NON_WORD = re.compile(r'[^\w\s]', re.ASCII)


def tokenize(text: str) -> List[str]:
    """
    Tokenize text for BM25 scoring.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase tokens longer than 2 characters, in input order

    Examples:
        >>> tokenize("Rust memory-safety, explained!")
        ['rust', 'memory', 'safety', 'explained']

        >>> tokenize("The cat is on a mat")
        ['the', 'cat', 'mat']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    text = _NON_WORD.sub(' ', text.lower())
    return [token for token in text.split() if len(token) >= MIN_TOKEN_LENGTH]


def is_stopword(term: str) -> bool:
    """True if the term carries no ranking signal."""
    return term in STOPWORDS
