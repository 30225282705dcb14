"""
Porter stemming engine.

Implements the algorithm from:
    Porter, 1980, An algorithm for suffix stripping, Program, Vol. 14,
    no. 3, pp 130-137
following the canonical ANSI C release by the author, including its two
departures from the paper (bli -> ble, logi -> log).

The engine works on a mutable byte buffer holding a lowercase word in
buffer[0..end]. Each stage rewrites the tail of the word in place and moves
`end` downwards; replacements never write past the bytes the word
originally occupied, so the buffer is never reallocated.

Usage:
    >>> buf = bytearray(b"pencils")
    >>> stem_buffer(buf, len(buf))
    6
    >>> bytes(buf[:6])
    b'pencil'
"""

from . import letters
from .rules import (
    DOUBLE_SUFFIXES,
    FINAL_SUFFIXES,
    INFLECTION_FIXUPS,
    KEEP_DOUBLED,
    SINGLE_SUFFIXES,
)

_E = ord("e")
_I = ord("i")
_L = ord("l")
_S = ord("s")

# Words this short are returned unchanged
MIN_STEM_LENGTH = 3


class Stemmer:
    """
    State for stemming a single word.

    Attributes:
        buffer: Word bytes, rewritten in place
        end: Index of the last byte of the word; only ever shrinks overall
        cursor: Position just before the most recently matched suffix

    A Stemmer is created for one word and thrown away afterwards; nothing
    carries over between words.
    """

    __slots__ = ("buffer", "end", "cursor")

    def __init__(self, buffer: bytearray, end: int):
        self.buffer = buffer
        self.end = end
        self.cursor = 0

    def __repr__(self) -> str:
        return f"Stemmer(buffer={bytes(self.buffer)!r}, end={self.end}, cursor={self.cursor})"

    @property
    def word(self) -> bytes:
        """Current logical content of the buffer."""
        return bytes(self.buffer[:self.end + 1])

    # Primitives

    def measure(self) -> int:
        """Measure of the stem in front of the last matched suffix."""
        return letters.measure(self.buffer, self.cursor)

    def ends_with(self, suffix: bytes) -> bool:
        """
        Check whether buffer[0..end] ends with suffix.

        On success the cursor is moved to end - len(suffix). A failed
        match leaves the cursor alone.
        """
        length = len(suffix)
        if length > self.end + 1:
            return False
        if self.buffer[self.end + 1 - length:self.end + 1] != suffix:
            return False
        self.cursor = self.end - length
        return True

    def set_to(self, replacement: bytes) -> None:
        """Replace everything after the cursor with replacement."""
        start = self.cursor + 1
        self.buffer[start:start + len(replacement)] = replacement
        self.end = self.cursor + len(replacement)

    def replace_if_measure_positive(self, replacement: bytes) -> None:
        if self.measure() > 0:
            self.set_to(replacement)

    # Stages

    def strip_inflections(self) -> None:
        """
        Get rid of plurals and -ed or -ing.

            caresses  ->  caress        feed      ->  feed
            ponies    ->  poni          agreed    ->  agree
            ties      ->  ti            disabled  ->  disable
            caress    ->  caress        matting   ->  mat
            cats      ->  cat           mating    ->  mate
            meetings  ->  meet          milling   ->  mill
        """
        buf = self.buffer

        if buf[self.end] == _S:
            if self.ends_with(b"sses"):
                self.end -= 2
            elif self.ends_with(b"ies"):
                self.set_to(b"i")
            elif buf[self.end - 1] != _S:
                self.end -= 1

        if self.ends_with(b"eed"):
            if self.measure() > 0:
                self.end -= 1
        elif (self.ends_with(b"ed") or self.ends_with(b"ing")) and \
                letters.vowel_in_stem(buf, self.cursor):
            self.end = self.cursor
            for suffix, replacement in INFLECTION_FIXUPS:
                if self.ends_with(suffix):
                    self.set_to(replacement)
                    return
            if letters.double_consonant(buf, self.end):
                if buf[self.end] not in KEEP_DOUBLED:
                    self.end -= 1
            elif self.measure() == 1 and letters.cvc(buf, self.end):
                # cursor == end here, so this appends an 'e'
                self.set_to(b"e")

    def terminal_y(self) -> None:
        """Turn a terminal y into i when there is another vowel in the stem."""
        if self.ends_with(b"y") and letters.vowel_in_stem(self.buffer, self.cursor):
            self.buffer[self.end] = _I

    def collapse_double_suffixes(self) -> None:
        """
        Map double suffixes to single ones: -ization (-ize plus -ation)
        becomes -ize, and so on. The stem in front of the suffix must have
        a positive measure.
        """
        if self.end < 1:
            return
        for suffix, replacement in DOUBLE_SUFFIXES.get(self.buffer[self.end - 1], ()):
            if self.ends_with(suffix):
                self.replace_if_measure_positive(replacement)
                return

    def collapse_single_suffixes(self) -> None:
        """Deal with -ic-, -full, -ness etc."""
        for suffix, replacement in SINGLE_SUFFIXES.get(self.buffer[self.end], ()):
            if self.ends_with(suffix):
                self.replace_if_measure_positive(replacement)
                return

    def trim_final_suffix(self) -> None:
        """Take off -ant, -ence etc. in context <c>vcvc<v>."""
        if self.end < 1:
            return
        for suffix, preceded_by in FINAL_SUFFIXES.get(self.buffer[self.end - 1], ()):
            if not self.ends_with(suffix):
                continue
            if preceded_by is not None and (
                self.cursor < 0 or self.buffer[self.cursor] not in preceded_by
            ):
                continue
            if self.measure() > 1:
                self.end = self.cursor
            return

    def tidy_ending(self) -> None:
        """Remove a final -e if m > 1, and change -ll to -l if m > 1."""
        buf = self.buffer
        self.cursor = self.end

        if buf[self.end] == _E:
            m = self.measure()
            if m > 1 or (m == 1 and not letters.cvc(buf, self.end - 1)):
                self.end -= 1

        if buf[self.end] == _L and letters.double_consonant(buf, self.end) \
                and self.measure() > 1:
            self.end -= 1

    def run(self) -> int:
        """Apply all stages in order and return the final end index."""
        self.strip_inflections()
        self.terminal_y()
        self.collapse_double_suffixes()
        self.collapse_single_suffixes()
        self.trim_final_suffix()
        self.tidy_ending()
        return self.end


def stem_buffer(buffer: bytearray, length: int) -> int:
    """
    Stem the word held in buffer[0:length] in place.

    The buffer must already be lowercase. Bytes after the returned length
    are leftovers and should be ignored.

    Args:
        buffer: Mutable buffer holding the word
        length: Number of leading bytes that make up the word

    Returns:
        Length of the stem, 0 <= result <= length

    Raises:
        ValueError: If length is negative or larger than the buffer
    """
    if length < 0 or length > len(buffer):
        raise ValueError(f"Word length {length} out of range for buffer of {len(buffer)} bytes")
    if length < MIN_STEM_LENGTH:
        return length
    return Stemmer(buffer, length - 1).run() + 1
