"""
Porter suffix-stripping engine.

Components:
- letters: consonant/vowel classification, measure, vowel/double/cvc checks
- rules: immutable suffix tables for the rewrite stages
- core: per-word engine state, suffix primitives and the six stages

The engine operates on lowercase ASCII bytes in a mutable buffer and never
allocates a new buffer; see porterstem.stemmer for str/bytes entry points.
"""

from .core import Stemmer, stem_buffer
from .letters import (
    consonant_pattern,
    cvc,
    double_consonant,
    is_consonant,
    is_vowel,
    measure,
    vowel_in_stem,
)

__all__ = [
    "Stemmer",
    "stem_buffer",
    "consonant_pattern",
    "cvc",
    "double_consonant",
    "is_consonant",
    "is_vowel",
    "measure",
    "vowel_in_stem",
]
