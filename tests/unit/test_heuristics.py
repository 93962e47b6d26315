"""Unit tests for the single-edit heuristics.

Tests verify heuristic behavior. Each test has exactly one assertion.
"""

import pytest

from typocheck.core import (
    InvalidHeuristicArgument,
    has_extra_character,
    is_missing_character,
    is_transposition,
)


class TestIsTransposition:
    """Test adjacent-letter swap detection."""

    def test_detects_swapped_interior_pair(self) -> None:
        """Swapping 's' and 'e' in 'dsek' gives 'desk'."""
        assert is_transposition("desk", "dsek")

    def test_detects_swapped_final_pair(self) -> None:
        """Swapping the last two letters of 'deks' gives 'desk'."""
        assert is_transposition("desk", "deks")

    def test_never_swaps_leading_character(self) -> None:
        """The first pair stays fixed because it chose the bucket."""
        assert not is_transposition("desk", "edsk")

    def test_identical_word_is_not_a_transposition(self) -> None:
        """A correctly spelled word does not match itself by swapping."""
        assert not is_transposition("desk", "desk")

    def test_unrelated_word_is_not_a_transposition(self) -> None:
        """Words of different shape never match."""
        assert not is_transposition("desk", "block")

    def test_two_letter_word_has_no_swappable_pair(self) -> None:
        """Two-letter words only have the leading pair."""
        assert not is_transposition("ab", "ba")


class TestHasExtraCharacter:
    """Test single-deletion detection against the scanned bucket."""

    BUCKET = {"door", "desk"}

    def test_detects_doubled_letter(self) -> None:
        """Dropping one 'o' from 'dooor' gives 'door'."""
        assert has_extra_character("door", "dooor", self.BUCKET)

    def test_detects_trailing_extra_letter(self) -> None:
        """Dropping the trailing 't' from 'doort' gives 'door'."""
        assert has_extra_character("door", "doort", self.BUCKET)

    def test_two_extra_letters_do_not_match(self) -> None:
        """Only one deletion is tried."""
        assert not has_extra_character("door", "dooort", self.BUCKET)

    def test_matches_any_word_in_bucket(self) -> None:
        """The check is bucket membership, not equality with the given word."""
        assert has_extra_character("desk", "dooor", self.BUCKET)

    def test_empty_word_has_nothing_to_delete(self) -> None:
        """An empty candidate never matches."""
        assert not has_extra_character("door", "", {""})


class TestIsMissingCharacter:
    """Test single-insertion detection."""

    def test_detects_missing_interior_letter(self) -> None:
        """Inserting 'e' into 'dsk' gives 'desk'."""
        assert is_missing_character("desk", "dsk")

    def test_detects_missing_leading_letter(self) -> None:
        """Inserting 'd' at the front of 'oor' gives 'door'."""
        assert is_missing_character("door", "oor")

    def test_detects_missing_final_letter(self) -> None:
        """Appending 'k' to 'des' gives 'desk'."""
        assert is_missing_character("desk", "des")

    def test_identical_word_is_not_missing_a_letter(self) -> None:
        """Equal-length words never match."""
        assert not is_missing_character("desk", "desk")

    def test_two_missing_letters_do_not_match(self) -> None:
        """Only a length difference of one can match."""
        assert not is_missing_character("desk", "de")

    def test_rejects_shorter_dictionary_word(self) -> None:
        """A dictionary word shorter than the candidate breaks the precondition."""
        with pytest.raises(InvalidHeuristicArgument):
            is_missing_character("desk", "block")

    def test_precondition_error_is_a_value_error(self) -> None:
        """Precondition failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            is_missing_character("a", "ab")
