"""
Unit tests for letter classification and measure helpers.
"""

import pytest

from porterstem.engine.letters import (
    consonant_pattern,
    cvc,
    double_consonant,
    is_consonant,
    is_vowel,
    measure,
    vowel_in_stem,
)


class TestClassification:
    """Test consonant/vowel classification, including the 'y' rule"""

    @pytest.mark.parametrize("pos", range(5))
    def test_plain_vowels(self, pos):
        assert not is_consonant(b"aeiou", pos)
        assert is_vowel(b"aeiou", pos)

    def test_plain_consonants(self):
        word = b"bcdfghjklmnpqrstvwxz"
        assert all(is_consonant(word, i) for i in range(len(word)))

    def test_y_at_start_is_consonant(self):
        assert is_consonant(b"yes", 0)

    def test_y_after_vowel_is_consonant(self):
        """'toy': y follows a vowel"""
        assert is_consonant(b"toy", 2)

    def test_y_after_consonant_is_vowel(self):
        """'sky': y follows a consonant"""
        assert is_vowel(b"sky", 2)

    def test_alternating_y_run(self):
        """In 'syzygy' every y follows a consonant"""
        assert consonant_pattern(b"syzygy", 5) == [True, False, True, False, True, False]

    def test_double_y(self):
        """'yy': first y consonant (start), second follows a consonant"""
        assert consonant_pattern(b"yy", 1) == [True, False]

    def test_out_of_range_is_not_consonant(self):
        assert not is_consonant(b"cat", 3)
        assert not is_consonant(b"cat", 100)
        assert not is_consonant(b"cat", -1)
        assert is_vowel(b"cat", 3)

    def test_non_letters_are_consonants(self):
        """Digits, hyphens and high-bit bytes classify as consonants"""
        assert is_consonant(b"a1", 1)
        assert is_consonant(b"a-b", 1)
        assert is_consonant(b"a\xe9", 1)

    def test_pattern_clipped_to_buffer(self):
        assert consonant_pattern(b"ab", 10) == [False, True]
        assert consonant_pattern(b"ab", -1) == []


class TestMeasure:
    """Test the [C](VC)^m[V] measure"""

    @pytest.mark.parametrize("word,expected", [
        (b"tr", 0),
        (b"ee", 0),
        (b"tree", 0),
        (b"y", 0),
        (b"by", 0),
        (b"trouble", 1),
        (b"oats", 1),
        (b"trees", 1),
        (b"ivy", 1),
        (b"troubles", 2),
        (b"private", 2),
        (b"oaten", 2),
        (b"orrery", 2),
    ])
    def test_measure_of_whole_word(self, word, expected):
        assert measure(word, len(word) - 1) == expected

    def test_measure_respects_boundary(self):
        """Only the prefix up to the boundary counts"""
        assert measure(b"troubles", 3) == 0  # "trou"
        assert measure(b"troubles", 4) == 1  # "troub"
        assert measure(b"troubles", 6) == 1  # "trouble"

    def test_negative_boundary(self):
        assert measure(b"private", -1) == 0


class TestVowelInStem:
    def test_contains_vowel(self):
        assert vowel_in_stem(b"plaster", 3)

    def test_no_vowel(self):
        assert not vowel_in_stem(b"bled", 1)  # "bl"
        assert not vowel_in_stem(b"sing", 0)  # "s"

    def test_upper_bound_is_inclusive(self):
        assert vowel_in_stem(b"sea", 1)
        assert not vowel_in_stem(b"sea", 0)

    def test_y_counts_as_vowel_after_consonant(self):
        assert vowel_in_stem(b"dying", 1)  # "dy"

    def test_empty_prefix(self):
        assert not vowel_in_stem(b"ing", -1)


class TestDoubleConsonant:
    @pytest.mark.parametrize("word", [b"add", b"fall", b"hiss", b"fizz", b"hopp"])
    def test_doubled_consonant(self, word):
        assert double_consonant(word, len(word) - 1)

    def test_doubled_vowel(self):
        assert not double_consonant(b"see", 2)

    def test_different_letters(self):
        assert not double_consonant(b"cat", 2)

    def test_first_position(self):
        assert not double_consonant(b"ll", 0)
        assert not double_consonant(b"", 0)


class TestCVC:
    @pytest.mark.parametrize("word", [b"cav", b"lov", b"hop", b"crim", b"fil"])
    def test_cvc_endings(self, word):
        assert cvc(word, len(word) - 1)

    @pytest.mark.parametrize("word", [b"snow", b"box", b"tray"])
    def test_w_x_y_endings_excluded(self, word):
        assert not cvc(word, len(word) - 1)

    def test_vowel_vowel_consonant(self):
        assert not cvc(b"fail", 3)

    def test_too_short(self):
        assert not cvc(b"at", 1)
        assert not cvc(b"hop", 1)
