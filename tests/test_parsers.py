"""
Message Parser Tests
====================

Tests for the literal and tolerant banned-word scanners and the context
window they emit.
"""

from checker.models import Context
from checker.parsers import ComplexMessageParser, NaiveMessageParser, context_bounds


# =============================================================================
# Context Window Tests
# =============================================================================

class TestContextBounds:
    """Tests for widening a match to its surrounding token."""

    def test_expands_to_whole_token(self):
        """Test the window covers the word containing the match."""
        text = "he is an assassin"
        start = text.index("ass")
        assert context_bounds(text, start, start + 3, 20) == (9, 17)

    def test_clipped_to_text(self):
        """Test the window never leaves the text."""
        assert context_bounds("bad", 0, 3, 20) == (0, 3)

    def test_radius_limits_growth(self):
        """Test long tokens are cut at the radius."""
        text = "x" * 50 + "bad" + "y" * 50
        left, right = context_bounds(text, 50, 53, 5)
        assert (left, right) == (45, 58)


# =============================================================================
# Naive Parser Tests
# =============================================================================

class TestNaiveMessageParser:
    """Tests for literal substring scanning."""

    def test_single_occurrence(self):
        """Test one occurrence yields one context."""
        sink = []
        NaiveMessageParser().check_for_banned_words("that is bad", ["bad"]) \
            .get_context_of_banned_word("That is BAD", "that is bad", sink)
        assert sink == [Context("bad", "BAD", "bad")]

    def test_no_occurrence(self):
        """Test no match emits nothing."""
        sink = []
        NaiveMessageParser().check_for_banned_words("all good", ["bad"]) \
            .get_context_of_banned_word("all good", "all good", sink)
        assert sink == []

    def test_overlapping_occurrences(self):
        """Test overlapping matches each produce a context."""
        sink = []
        NaiveMessageParser().check_for_banned_words("aaa", ["aa"]) \
            .get_context_of_banned_word("aaa", "aaa", sink)
        assert len(sink) == 2

    def test_same_span_multiple_words(self):
        """Test one span matching two banned words emits one context each."""
        sink = []
        NaiveMessageParser().check_for_banned_words("badass", ["bad", "ass", "badass"]) \
            .get_context_of_banned_word("badass", "badass", sink)
        assert [c.banned_word for c in sink] == ["bad", "ass", "badass"]

    def test_original_text_used_for_display(self):
        """Test the original context comes from the pre-substitution text."""
        sink = []
        NaiveMessageParser().check_for_banned_words("so bad", ["bad"]) \
            .get_context_of_banned_word("so b4d", "so bad", sink)
        assert sink == [Context("bad", "b4d", "bad")]

    def test_rescan_resets_matches(self):
        """Test a parser reused for another text forgets old matches."""
        parser = NaiveMessageParser()
        parser.check_for_banned_words("bad", ["bad"])
        sink = []
        parser.check_for_banned_words("fine", ["bad"]) \
            .get_context_of_banned_word("fine", "fine", sink)
        assert sink == []


# =============================================================================
# Complex Parser Tests
# =============================================================================

class TestComplexMessageParser:
    """Tests for tolerant scanning."""

    def _scan(self, text, words, **kwargs):
        sink = []
        ComplexMessageParser(**kwargs).process_banned_words(words) \
            .get_context_of_banned_word(text, text, sink)
        return sink

    def test_spaced_letters(self):
        """Test letters separated by spaces are found."""
        assert self._scan("you are b a d", ["bad"]) == [Context("bad", "b a d", "b a d")]

    def test_punctuated_letters(self):
        """Test letters separated by punctuation are found."""
        assert self._scan("b.a.d", ["bad"]) == [Context("bad", "b.a.d", "b.a.d")]

    def test_repeated_letters(self):
        """Test stretched letters are found."""
        assert self._scan("so baaaad", ["bad"]) == [Context("bad", "baaaad", "baaaad")]

    def test_match_does_not_borrow_next_word(self):
        """Test a repeated letter never pulls the next word into the match."""
        assert self._scan("glass shelf", ["ass"]) == [Context("ass", "glass", "glass")]
        assert self._scan("class sucks", ["ass"]) == [Context("ass", "class", "class")]

    def test_plain_occurrence(self):
        """Test the literal word is also matched."""
        assert len(self._scan("bad", ["bad"])) == 1

    def test_gap_limit(self):
        """Test more separators than allowed are not matched."""
        assert self._scan("b..a..d", ["bad"]) == []
        assert len(self._scan("b..a..d", ["bad"], max_interleaved=2)) == 1

    def test_letters_not_accepted_as_gap(self):
        """Test extra letters between letters do not match."""
        assert self._scan("bread", ["bad"]) == []

    def test_special_characters_in_word(self):
        """Test banned words with regex metacharacters compile safely."""
        assert len(self._scan("a.b", ["a.b"])) == 1

    def test_no_banned_words(self):
        """Test nothing is emitted without banned words."""
        assert self._scan("anything", []) == []
