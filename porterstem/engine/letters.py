"""
Letter classification and measure helpers.

Porter's definitions:
- A vowel is one of a, e, i, o, u.
- A consonant is any other letter, except that 'y' is a consonant only at
  the start of a word or when it follows a vowel ("toy", "yes"), and a
  vowel when it follows a consonant ("sky", "syzygy").

Every helper takes the word buffer and a position. Positions outside the
buffer are classified as "not a consonant" instead of raising.
"""

from typing import List

VOWELS = frozenset(b"aeiou")
Y = ord("y")
NO_CVC_ENDING = frozenset(b"wxy")


def consonant_pattern(buffer: bytes, stop: int) -> List[bool]:
    """
    Classify positions 0..stop (inclusive) in one forward pass.

    'y' takes the opposite class of the letter before it, so each position
    depends only on its left neighbour.

    Args:
        buffer: Word buffer (bytes or bytearray)
        stop: Last position to classify; clipped to the buffer

    Returns:
        List where item i is True if position i is a consonant

    Examples:
        >>> consonant_pattern(b"toy", 2)
        [True, False, True]
        >>> consonant_pattern(b"syzygy", 5)
        [True, False, True, False, True, False]
    """
    pattern: List[bool] = []
    for pos in range(min(stop + 1, len(buffer))):
        ch = buffer[pos]
        if ch in VOWELS:
            consonant = False
        elif ch == Y:
            consonant = pos == 0 or not pattern[-1]
        else:
            consonant = True
        pattern.append(consonant)
    return pattern


def is_consonant(buffer: bytes, pos: int) -> bool:
    """True if the letter at pos is a consonant (False outside the buffer)."""
    if pos < 0 or pos >= len(buffer):
        return False
    return consonant_pattern(buffer, pos)[pos]


def is_vowel(buffer: bytes, pos: int) -> bool:
    return not is_consonant(buffer, pos)


def measure(buffer: bytes, boundary: int) -> int:
    """
    Count consonant sequences in buffer[0..boundary].

    Writing the prefix as [C](VC)^m[V], where C and V are maximal consonant
    and vowel runs, the measure is m:

        tr, ee, tree, y, by          -> 0
        trouble, oats, trees, ivy    -> 1
        troubles, private, oaten     -> 2

    Each (VC) pair is exactly one vowel->consonant transition, so the
    measure is the number of such transitions.

    Args:
        buffer: Word buffer
        boundary: Last position included (negative means an empty prefix)

    Returns:
        The measure m (>= 0)
    """
    pattern = consonant_pattern(buffer, boundary)
    return sum(
        1 for previous, current in zip(pattern, pattern[1:])
        if current and not previous
    )


def vowel_in_stem(buffer: bytes, boundary: int) -> bool:
    """True if buffer[0..boundary] (inclusive) contains a vowel."""
    return not all(consonant_pattern(buffer, boundary))


def double_consonant(buffer: bytes, pos: int) -> bool:
    """True if pos and pos-1 hold the same consonant ("add", "fall")."""
    if pos < 1 or pos >= len(buffer):
        return False
    if buffer[pos] != buffer[pos - 1]:
        return False
    return is_consonant(buffer, pos)


def cvc(buffer: bytes, pos: int) -> bool:
    """
    True if pos-2, pos-1, pos is consonant-vowel-consonant and the second
    consonant is not w, x or y.

    Used when restoring an 'e' at the end of a short word:

        cav(e), lov(e), hop(e), crim(e)    but    snow, box, tray
    """
    if pos < 2 or pos >= len(buffer):
        return False
    pattern = consonant_pattern(buffer, pos)
    if not pattern[pos] or pattern[pos - 1] or not pattern[pos - 2]:
        return False
    return buffer[pos] not in NO_CVC_ENDING
