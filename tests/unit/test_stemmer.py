"""
Unit tests for the public stemming entry points.
"""

import threading

import pytest

from porterstem import StemmingError, stem, stem_bytes, stem_words


class TestStem:
    """Test str entry point"""

    @pytest.mark.parametrize("word,expected", [
        ("caresses", "caress"),
        ("ponies", "poni"),
        ("ties", "ti"),
        ("cats", "cat"),
        ("feed", "feed"),
        ("plastered", "plaster"),
        ("bled", "bled"),
        ("motoring", "motor"),
        ("sing", "sing"),
        ("conflated", "conflat"),
        ("troubled", "troubl"),
        ("sized", "size"),
        ("hopping", "hop"),
        ("tanned", "tan"),
        ("falling", "fall"),
        ("hissing", "hiss"),
        ("fizzed", "fizz"),
        ("failing", "fail"),
        ("filing", "file"),
        ("happy", "happi"),
        ("sky", "sky"),
        ("relational", "relat"),
        ("conditional", "condit"),
        ("rational", "ration"),
        ("valenci", "valenc"),
        ("digitizer", "digit"),
    ])
    def test_full_stems(self, word, expected):
        assert stem(word) == expected

    def test_later_stages_shorten_stage_one_results(self):
        """'agreed' is 'agree' after stage 1, then loses the final e"""
        assert stem("agreed") == "agre"

    def test_hesitanci_runs_through_trim_stage(self):
        """Stage 3 gives 'hesitance'; stage 5 removes -ance ('hesit' has measure 2)"""
        assert stem("hesitanci") == "hesit"

    def test_lowercases_input(self):
        assert stem("Connections") == "connect"
        assert stem("RUNNING") == "run"

    def test_empty_string(self):
        assert stem("") == ""

    @pytest.mark.parametrize("word", ["a", "is", "at", "by"])
    def test_short_words_unchanged(self, word):
        assert stem(word) == word

    def test_short_words_are_still_lowercased(self):
        assert stem("IS") == "is"

    def test_non_ascii_rejected(self):
        with pytest.raises(StemmingError):
            stem("café")

    def test_stemming_error_is_value_error(self):
        assert issubclass(StemmingError, ValueError)


class TestStemBytes:
    """Test bytes entry point"""

    def test_bytes_input(self):
        assert stem_bytes(b"Running") == b"run"

    def test_bytes_input_not_modified(self):
        word = b"ponies"
        assert stem_bytes(word) == b"poni"
        assert word == b"ponies"

    def test_bytearray_rewritten_in_place(self):
        buffer = bytearray(b"Caresses")
        assert stem_bytes(buffer) == b"caress"
        assert buffer[:6] == b"caress"
        assert len(buffer) == 8

    def test_empty(self):
        assert stem_bytes(b"") == b""
        assert stem_bytes(bytearray()) == b""

    def test_high_bit_bytes_pass_through_as_consonants(self):
        """Non-ASCII bytes are not rejected; they classify as consonants"""
        assert stem_bytes(b"caf\xc3\xa9s") == b"caf\xc3\xa9"


class TestStemWords:
    def test_batch(self):
        assert stem_words(["cats", "ponies", "is"]) == ["cat", "poni", "is"]

    def test_empty_batch(self):
        assert stem_words([]) == []

    def test_error_propagates(self):
        with pytest.raises(StemmingError):
            stem_words(["cats", "naïve"])


IDEMPOTENT_WORDS = [
    "caresses", "ponies", "cats", "motoring", "hopping", "relational",
    "conditional", "rational", "digitizer", "generalizations", "oscillators",
    "connection", "electrical", "happy", "adoption",
]


class TestProperties:
    """Properties that must hold for any input"""

    def test_non_growth(self, vocabulary):
        for word, _ in vocabulary:
            assert len(stem(word)) <= len(word)

    def test_deterministic(self, vocabulary):
        first = [stem(word) for word, _ in vocabulary]
        second = [stem(word) for word, _ in reversed(vocabulary)]
        assert first == list(reversed(second))

    def test_restemming_never_grows(self, vocabulary):
        for word, _ in vocabulary:
            once = stem(word)
            twice = stem(once)
            assert len(twice) <= len(once)

    @pytest.mark.parametrize("word", IDEMPOTENT_WORDS)
    def test_idempotent_for_common_words(self, word):
        assert stem(stem(word)) == stem(word)

    def test_not_idempotent_everywhere(self):
        """Known counterexample: the stem of 'agreed' loses its e again"""
        assert stem("agreed") == "agre"
        assert stem("agre") == "agr"

    def test_concurrent_calls_on_distinct_buffers(self, vocabulary):
        expected = {word: stem(word) for word, _ in vocabulary}
        failures = []

        def worker():
            for word, _ in vocabulary:
                if stem(word) != expected[word]:
                    failures.append(word)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert failures == []
