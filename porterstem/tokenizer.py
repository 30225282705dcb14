"""
Tokenizer for search indexing.

Tokenization pipeline:
1. Lowercase conversion
2. Extract alphanumeric words (including hyphens)
3. Filter stopwords (common English words)
4. Filter pure numbers
5. Apply Porter stemming (reduce to root form: "connections" → "connect")
6. Return list of meaningful tokens
"""

import logging
import re
from typing import List

from .stemmer import StemmingError, stem

logger = logging.getLogger(__name__)

# English stopwords (based on Elasticsearch/Lucene standard list)
# These are common words that don't help with ranking
STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'but', 'by',
    'for', 'if', 'in', 'into', 'is', 'it',
    'no', 'not', 'of', 'on', 'or', 'such',
    'that', 'the', 'their', 'then', 'there', 'these',
    'they', 'this', 'to', 'was', 'will', 'with'
])

_WORD_PATTERN = re.compile(r'\b[a-z0-9]+(?:-[a-z0-9]+)*\b')
_NUMBER_PATTERN = re.compile(r'^[0-9-]+$')


def _stem_token(token: str) -> str:
    try:
        return stem(token)
    except StemmingError as e:
        # Index the raw token rather than dropping it
        logger.debug(f"Keeping token unstemmed: {e}")
        return token


def tokenize(text: str, remove_stopwords: bool = True) -> List[str]:
    """
    Tokenize text into stemmed search terms.

    Process:
    1. Convert to lowercase
    2. Extract words (alphanumeric + hyphens preserved)
    3. Remove stopwords (common English words like 'the', 'is', 'and')
    4. Remove pure numbers (keep alphanumeric terms like 'bm25', 'postgresql')
    5. Apply stemming (reduce to root: "searching" → "search")

    Args:
        text: Input text to tokenize
        remove_stopwords: Drop stopwords before stemming (default: True)

    Returns:
        List of stemmed lowercase tokens

    Examples:
        >>> tokenize("Connected connections are connecting!")
        ['connect', 'connect', 'connect']

        >>> tokenize("PostgreSQL 15.3 with pgvector")
        ['postgresql', 'pgvector']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    tokens = _WORD_PATTERN.findall(text.lower())

    tokens = [
        t for t in tokens
        if not (remove_stopwords and t in STOPWORDS) and not _NUMBER_PATTERN.match(t)
    ]

    return [_stem_token(t) for t in tokens]
