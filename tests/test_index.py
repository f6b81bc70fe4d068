"""Test the first-character word index."""

import pytest

from src.squares import WordIndex, WordSet, LengthMismatch


class TestWordIndex:
    """Test cases for WordIndex."""

    def test_candidates_starting_with(self):
        """Words are grouped by first character."""
        index = WordIndex.build(WordSet(["ABLE", "BARE", "CARE", "DARE", "AREA"]))

        assert index.candidates_starting_with("A") == ("ABLE", "AREA")
        assert index.candidates_starting_with("B") == ("BARE",)

    def test_no_match_returns_empty(self):
        """A missing first character yields an empty sequence, not an error."""
        index = WordIndex.build(WordSet(["ABLE", "BARE", "CARE"]))

        assert index.candidates_starting_with("Z") == ()

    def test_insertion_order_kept(self):
        index = WordIndex.build(WordSet(["ARIA", "ABLE", "AXLE"]))

        assert index.candidates_starting_with("A") == ("ARIA", "ABLE", "AXLE")

    def test_membership_and_length(self):
        index = WordIndex.build(WordSet(["ABLE", "BARE"]))

        assert "ABLE" in index
        assert "CARE" not in index
        assert len(index) == 2
        assert index.length == 4

    def test_rejects_mixed_lengths(self):
        """The index refuses a word set whose words do not match its length."""

        class MixedWords:
            length = 4
            words = ("ABLE", "CAT")

            def __iter__(self):
                return iter(self.words)

        with pytest.raises(LengthMismatch):
            WordIndex.build(MixedWords())
