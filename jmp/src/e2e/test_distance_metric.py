# src/e2e/test_distance_metric.py

import itertools
import pytest

from jmp.distance import flip, string_distance, string_distance_matrix, format_distance
from jmp.errors import ResourceExhausted
import jmp.distance as D


SAMPLES = [
    ("Python", "is", "awesome"),
    ("red", "blue", "green"),
    ("father", "son", "holy spirit"),
    ("bulbasaur", "charmander", "squirtle"),
    ("six", "Seven", "8"),
    ("hlaalu", "redoran", "telvanni"),
]
WORDS = [w for sample in SAMPLES for w in sample]


@pytest.mark.parametrize("s", WORDS)
def test_identity_and_edge_deletions(s):
    assert string_distance(s, s) == 0.0
    # dropping the first character costs the position-1 price
    assert string_distance(s, s[1:]) == 1.0
    # dropping the last character costs 1/len(s)
    assert string_distance(s, s[:-1]) == flip(len(s))


@pytest.mark.parametrize("sample", SAMPLES)
def test_symmetric(sample):
    for a, b in itertools.permutations(sample, 2):
        assert string_distance(a, b) == string_distance(b, a)


@pytest.mark.parametrize("sample", SAMPLES)
def test_triangle_inequality(sample):
    for a, b, c in itertools.permutations(sample, 3):
        assert string_distance(a, c) <= string_distance(a, b) + string_distance(b, c)


def test_empty_strings():
    assert string_distance("", "") == 0.0
    assert string_distance("", "ab") == 1.0 + 0.5
    assert string_distance("abc", "") == 1.0 + 0.5 + flip(3)


def test_suffix_is_cheaper_than_prefix():
    # same number of characters removed, at the end vs at the start
    assert string_distance("table", "tab") == flip(4) + flip(5)
    assert string_distance("table", "ble") > string_distance("table", "tab")


def test_no_substitution_primitive():
    # 'a' vs 'b' at position 1: delete (1) + insert (1)
    assert string_distance("a", "b") == 2.0
    # one differing character at position 3 of 3
    assert string_distance("abc", "abd") == 2 * flip(3)


def test_prefix_match_beats_other_names():
    assert string_distance(b"table", b"tab") < string_distance(b"notes", b"tab")


def test_bytes_and_str_agree_on_ascii():
    for a, b in itertools.combinations(WORDS, 2):
        assert string_distance(a, b) == string_distance(a.encode(), b.encode())


def test_rolling_rows_match_full_matrix():
    for a, b in itertools.product(WORDS + ["", "tab", "table"], repeat=2):
        assert string_distance(a, b) == string_distance_matrix(a, b)


def test_allocation_failure_is_resource_exhausted(monkeypatch):
    def _flip(n):
        raise MemoryError
    monkeypatch.setattr(D, "flip", _flip)
    with pytest.raises(ResourceExhausted):
        string_distance("ab", "cd")


def test_format_distance():
    assert format_distance(1.0) == "1"
    assert format_distance(0.0) == "0"
    assert format_distance(0.5) == "0.5"
    assert format_distance(1 / 3) == "0.3333333333333333"
