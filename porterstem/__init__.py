"""
Porter stemming for English search indexing.

Reduces English words to their stems with the Porter (1980) suffix-stripping
algorithm, so that "connect", "connected", "connecting" and "connections"
all index as "connect".

Components:
- engine: in-place suffix-stripping engine over lowercase ASCII bytes
- stemmer: str/bytes entry points and StemmingError
- tokenizer: text to stemmed search tokens with stopword removal
- cli / main: command-line and HTTP surfaces
"""

from .engine import stem_buffer
from .stemmer import StemmingError, stem, stem_bytes, stem_words
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "stem",
    "stem_bytes",
    "stem_buffer",
    "stem_words",
    "tokenize",
    "StemmingError",
]
