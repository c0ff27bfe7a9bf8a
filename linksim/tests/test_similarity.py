"""Unit tests for similarity utilities."""

from fractions import Fraction

import pytest
from linksim.utils.errors import SequenceTypeError, SimilarityError
from linksim.utils.similarity import common_prefix_length, jaro, jaro_winkler

TOLERANCE = 1e-9


def test_jaro_identical():
    """Test Jaro with identical strings."""
    assert jaro("john", "john") == 1.0
    assert jaro("", "") == 1.0
    assert jaro("A", "A") == 1.0


def test_jaro_winkler_identical():
    """Test Jaro-Winkler with identical strings."""
    assert jaro_winkler("john", "john") == 1.0
    assert jaro_winkler("", "") == 1.0


def test_jaro_empty():
    """Test Jaro with one empty string."""
    assert jaro("", "john") == 0.0
    assert jaro("john", "") == 0.0
    assert jaro_winkler("", "john") == 0.0
    assert jaro_winkler("john", "") == 0.0


def test_jaro_no_common_characters():
    assert jaro("A", "B") == 0.0
    assert jaro_winkler("A", "B") == 0.0
    assert jaro("abc", "xyz") == 0.0


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("MARTHA", "MARHTA", Fraction(17, 18)),
        ("DIXON", "DICKSONX", Fraction(23, 30)),
        ("JON", "JAN", Fraction(7, 9)),
        ("--", "-", Fraction(5, 6)),
        ("SHACKLEFORD", "SHACKELFORD", Fraction(32, 33)),
        ("aaaaaabc", "aaaaaabd", Fraction(11, 12)),
    ],
)
def test_jaro_known_values(a, b, expected):
    assert jaro(a, b) == pytest.approx(float(expected), abs=TOLERANCE)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("MARTHA", "MARHTA", Fraction(173, 180)),
        ("DIXON", "DICKSONX", Fraction(61, 75)),
        ("--", "-", Fraction(17, 20)),
        ("aaaaaabc", "aaaaaabd", Fraction(19, 20)),
        ("DUNNINGHAM", "CUNNIGHAM", Fraction(121, 135)),
    ],
)
def test_jaro_winkler_known_values(a, b, expected):
    assert jaro_winkler(a, b) == pytest.approx(float(expected), abs=TOLERANCE)


def test_jaro_short_strings_use_empty_window():
    """A window below zero must not match anything out of range."""
    assert jaro("ab", "ba") == 0.0
    assert jaro("--", "---") == pytest.approx(8 / 9, abs=TOLERANCE)


def test_jaro_first_unmatched_position_wins():
    # Each "a" in the first string claims the earliest free "a" in the second.
    assert jaro("aaa", "aa") == pytest.approx(8 / 9, abs=TOLERANCE)
    assert jaro("mm", "mmm") == pytest.approx(8 / 9, abs=TOLERANCE)


def test_jaro_counts_transpositions():
    # Same matched characters, different amount of reordering.
    assert jaro("ABCDUVWXYZ", "DBCAUVWXYZ") == pytest.approx(29 / 30, abs=TOLERANCE)
    assert jaro("ABCDUVWXYZ", "DABCUVWXYZ") == pytest.approx(14 / 15, abs=TOLERANCE)
    assert jaro("CRATE", "TRACE") == pytest.approx(11 / 15, abs=TOLERANCE)


def test_jaro_winkler_prefix_bonus():
    """Test Jaro-Winkler gives bonus for common prefix."""
    assert jaro_winkler("MARTHA", "MARHTA") > jaro("MARTHA", "MARHTA")
    assert jaro_winkler("CRATE", "TRACE") == jaro("CRATE", "TRACE")


def test_common_prefix_length_is_capped():
    assert common_prefix_length("JOHNSON", "JOHNSTON") == 4
    assert common_prefix_length("JON", "JAN") == 1
    assert common_prefix_length("JON", "JO") == 2
    assert common_prefix_length("abc", "xbc") == 0
    assert common_prefix_length("", "abc") == 0
    assert common_prefix_length("abcdef", "abcdef", limit=6) == 6


def test_none_compares_as_empty():
    assert jaro(None, None) == 1.0
    assert jaro(None, "john") == 0.0
    assert jaro_winkler("john", None) == 0.0


def test_accepts_bytes_and_token_lists():
    assert jaro(b"MARTHA", b"MARHTA") == pytest.approx(17 / 18, abs=TOLERANCE)
    assert jaro(["M", "A", "R", "T", "H", "A"], list("MARHTA")) == pytest.approx(17 / 18, abs=TOLERANCE)
    assert jaro_winkler(("john", "smith"), ("john", "smith")) == 1.0


def test_rejects_non_sequences():
    with pytest.raises(SequenceTypeError, match="Argument 'a'"):
        jaro(42, "abc")
    with pytest.raises(SequenceTypeError, match="Argument 'b'"):
        jaro_winkler("abc", {"a", "b"})
    with pytest.raises(TypeError):
        jaro("abc", 3.5)
    with pytest.raises(SimilarityError):
        jaro(iter("abc"), "abc")


def test_results_are_floats():
    assert isinstance(jaro("JON", "JAN"), float)
    assert isinstance(jaro_winkler("JON", "JAN"), float)
