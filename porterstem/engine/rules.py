"""
Suffix tables for the rewrite stages.

Stages 3-5 dispatch on a single filter letter (the last or next-to-last
letter of the word) and then try the suffixes of that family in order.
The first suffix that matches decides the outcome for the stage, even when
its measure guard refuses the rewrite. Table order is therefore significant:
"ational" must be tried before "tional", "ement" before "ment" before "ent".

All tables are read-only module constants keyed by byte value.
"""

from typing import Dict, Optional, Tuple

SuffixRule = Tuple[bytes, bytes]
TrimRule = Tuple[bytes, Optional[bytes]]

# Stage 1 corrections applied after removing -ed / -ing
INFLECTION_FIXUPS: Tuple[SuffixRule, ...] = (
    (b"at", b"ate"),
    (b"bl", b"ble"),
    (b"iz", b"ize"),
)

# A doubled consonant from these letters is kept after -ed / -ing removal
KEEP_DOUBLED = frozenset(b"lsz")

# Stage 3: double suffixes, keyed by the next-to-last letter
DOUBLE_SUFFIXES: Dict[int, Tuple[SuffixRule, ...]] = {
    ord("a"): (
        (b"ational", b"ate"),
        (b"tional", b"tion"),
    ),
    ord("c"): (
        (b"enci", b"ence"),
        (b"anci", b"ance"),
    ),
    ord("e"): (
        (b"izer", b"ize"),
    ),
    ord("l"): (
        (b"bli", b"ble"),  # departure from the 1980 paper's abli -> able
        (b"alli", b"al"),
        (b"entli", b"ent"),
        (b"eli", b"e"),
        (b"ousli", b"ous"),
    ),
    ord("o"): (
        (b"ization", b"ize"),
        (b"ation", b"ate"),
        (b"ator", b"ate"),
    ),
    ord("s"): (
        (b"alism", b"al"),
        (b"iveness", b"ive"),
        (b"fulness", b"ful"),
        (b"ousness", b"ous"),
    ),
    ord("t"): (
        (b"aliti", b"al"),
        (b"iviti", b"ive"),
        (b"biliti", b"ble"),
    ),
    ord("g"): (
        (b"logi", b"log"),  # departure
    ),
}

# Stage 4: -ic-, -full, -ness etc., keyed by the last letter
SINGLE_SUFFIXES: Dict[int, Tuple[SuffixRule, ...]] = {
    ord("e"): (
        (b"icate", b"ic"),
        (b"ative", b""),
        (b"alize", b"al"),
    ),
    ord("i"): (
        (b"iciti", b"ic"),
    ),
    ord("l"): (
        (b"ical", b"ic"),
        (b"ful", b""),
    ),
    ord("s"): (
        (b"ness", b""),
    ),
}

# Stage 5: suffixes removed in context <c>vcvc<v>, keyed by the
# next-to-last letter. The second item, when set, lists the letters that
# must immediately precede the suffix.
FINAL_SUFFIXES: Dict[int, Tuple[TrimRule, ...]] = {
    ord("a"): ((b"al", None),),
    ord("c"): ((b"ance", None), (b"ence", None)),
    ord("e"): ((b"er", None),),
    ord("i"): ((b"ic", None),),
    ord("l"): ((b"able", None), (b"ible", None)),
    ord("n"): ((b"ant", None), (b"ement", None), (b"ment", None), (b"ent", None)),
    ord("o"): ((b"ou", None), (b"ion", b"st")),
    ord("s"): ((b"ism", None),),
    ord("t"): ((b"ate", None), (b"iti", None)),
    ord("u"): ((b"ous", None),),
    ord("v"): ((b"ive", None),),
    ord("z"): ((b"ize", None),),
}
