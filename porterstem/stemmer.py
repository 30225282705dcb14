"""
Porter Stemmer for English.

Uses the original Porter (1980) suffix-stripping algorithm:
https://tartarus.org/martin/PorterStemmer/

Entry points:
- stem(): str in, str out (allocates)
- stem_bytes(): rewrites a bytearray in place, returns the stem bytes
- stem_words(): batch helper for the CLI and HTTP service

Examples:
- "caresses" → "caress"
- "generalizations" → "gener"
- "running" → "run"
- "happy" → "happi"
"""

import logging
from typing import Iterable, List, Union

from .engine import stem_buffer

logger = logging.getLogger(__name__)


class StemmingError(ValueError):
    """Word cannot be stemmed (non-ASCII text or degenerate engine result)"""


def _check_length(word: Union[str, bytes, bytearray], length: int, original: int) -> None:
    # The engine only ever shrinks a non-empty word to 1..original bytes
    if not 0 < length <= original:
        raise StemmingError(f"Stemming {word!r} produced invalid length {length}")


def stem(word: str) -> str:
    """
    Stem a single word using the Porter algorithm.

    Args:
        word: Word to stem (any case, ASCII only)

    Returns:
        Stemmed word, lowercase. Empty input returns an empty string.

    Raises:
        StemmingError: If the word contains non-ASCII characters

    Examples:
        >>> stem("Connections")
        'connect'
        >>> stem("relational")
        'relat'
        >>> stem("is")
        'is'
    """
    if not word:
        return ""
    if not word.isascii():
        raise StemmingError(f"Cannot stem non-ASCII word: {word!r}")

    buffer = bytearray(word.lower(), "ascii")
    length = stem_buffer(buffer, len(buffer))
    _check_length(word, length, len(buffer))
    return buffer[:length].decode("ascii")


def stem_bytes(buffer: Union[bytes, bytearray]) -> bytes:
    """
    Stem a word given as raw bytes.

    A bytearray is lowercased and rewritten in place (bytes beyond the
    returned stem are leftovers); immutable bytes are copied first.
    Non-ASCII bytes are not rejected: the engine treats them as consonants.

    Args:
        buffer: Word bytes

    Returns:
        Stem bytes

    Examples:
        >>> stem_bytes(b"Running")
        b'run'
    """
    if isinstance(buffer, bytes):
        buffer = bytearray(buffer)
    if not buffer:
        return b""

    # ASCII-only lowercase, in place
    buffer[:] = buffer.lower()
    length = stem_buffer(buffer, len(buffer))
    _check_length(buffer, length, len(buffer))
    return bytes(buffer[:length])


def stem_words(words: Iterable[str]) -> List[str]:
    """
    Stem a batch of words.

    Raises StemmingError on the first word that cannot be stemmed; callers
    that prefer to keep going should call stem() per word.
    """
    stems = [stem(word) for word in words]
    logger.debug(f"Stemmed batch of {len(stems)} words")
    return stems
