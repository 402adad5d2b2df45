import random

import pytest

from er_save_copy.core.pattern import find_all


def brute_force(haystack, needle):
    return [i for i in range(len(haystack) - len(needle) + 1) if haystack[i:i + len(needle)] == needle]


def test_finds_every_occurrence_in_order():
    assert list(find_all(b"abcabcab", b"ab")) == [0, 3, 6]


def test_overlapping_occurrences():
    assert list(find_all(b"aaaa", b"aa")) == [0, 1, 2]


def test_needle_equal_to_haystack():
    assert list(find_all(b"steam", b"steam")) == [0]


def test_no_match():
    assert list(find_all(b"abcdef", b"xy")) == []


def test_needle_longer_than_haystack():
    assert list(find_all(b"abc", b"abcd")) == []


def test_empty_haystack():
    assert list(find_all(b"", b"a")) == []


def test_empty_needle_is_rejected():
    with pytest.raises(ValueError):
        list(find_all(b"abc", b""))


def test_each_call_is_a_fresh_scan():
    haystack = bytearray(b"xxIDxxID")
    first = find_all(haystack, b"ID")
    assert list(first) == [2, 6]
    assert list(first) == []
    assert list(find_all(haystack, b"ID")) == [2, 6]


def test_matches_brute_force_search():
    rng = random.Random(1234)
    for _ in range(50):
        haystack = bytes(rng.randrange(3) for _ in range(rng.randrange(0, 200)))
        needle = bytes(rng.randrange(3) for _ in range(rng.randrange(1, 5)))
        offsets = list(find_all(haystack, needle))
        assert offsets == brute_force(haystack, needle)
        assert all(haystack[o:o + len(needle)] == needle for o in offsets)
