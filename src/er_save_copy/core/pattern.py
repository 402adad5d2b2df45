"""Byte pattern search used to find the owner id inside slot data."""

from collections.abc import Iterator


def find_all(haystack: bytes, needle: bytes) -> Iterator[int]:
    """Yield every offset in haystack where needle starts, in ascending order.

    Candidates start as every offset where the needle fits and are filtered
    one needle byte at a time. Occurrences may overlap. Each call is an
    independent scan.

    Args:
        haystack: Buffer to search (a single slot, a few megabytes at most)
        needle: Non-empty byte sequence to look for

    Raises:
        ValueError: If needle is empty
    """
    if not needle:
        raise ValueError("Cannot search for an empty byte pattern")

    candidates = range(len(haystack) - len(needle) + 1)
    for i, value in enumerate(needle):
        candidates = [start for start in candidates if haystack[start + i] == value]
        if not candidates:
            return

    yield from candidates
