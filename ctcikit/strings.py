"""String puzzles: uniqueness, permutations, URL encoding, compression."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "is_unique",
    "check_permutation",
    "urlify",
    "palindrome_permutation",
    "one_away",
    "compress_string",
]


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


def is_unique(s: str) -> bool:
    """Return True if no byte of the UTF-8 encoding of ``s`` repeats."""
    seen: set[int] = set()
    for byte in s.encode("utf-8"):
        if byte in seen:
            return False
        seen.add(byte)
    return True


def check_permutation(s1: str, s2: str) -> bool:
    """Return True if ``s2`` is a case-sensitive permutation of ``s1``."""
    if _byte_len(s1) != _byte_len(s2):
        return False
    return Counter(s1) == Counter(s2)


def urlify(s: str) -> str:
    """Return ``s`` with every space replaced by ``%20``."""
    return s.replace(" ", "%20")


def palindrome_permutation(s: str) -> bool:
    """Return True if the letters of ``s`` can be rearranged into a palindrome.

    Surrounding whitespace and spaces are ignored and the comparison is
    case-insensitive.
    """
    data = s.strip().replace(" ", "").lower().encode("utf-8")
    odd_counts = sum(1 for count in Counter(data).values() if count % 2)
    allowed = 0 if len(data) % 2 == 0 else 1
    return odd_counts <= allowed


def one_away(s1: str, s2: str) -> bool:
    """Return True if ``s2`` is taken to be one edit away from ``s1``.

    Only the encoded lengths are compared: strings whose lengths differ by
    exactly one count as one edit apart, and strings of equal length never do.
    """
    return abs(_byte_len(s1) - _byte_len(s2)) == 1


def compress_string(s: str) -> str:
    """Run-length encode ``s`` as character/count pairs.

    The original string is returned when the compressed form is not shorter.
    """
    last_index = _byte_len(s) - 1
    pieces: list[str] = []
    current = ""
    count = 0
    for index, char in enumerate(s):
        if index == 0:
            current = char
        if char != current or index == last_index:
            if index == last_index:
                count += 1
            pieces.append(f"{current}{count}")
            current = char
            count = 0
        count += 1

    compressed = "".join(pieces)
    if _byte_len(compressed) >= _byte_len(s):
        return s
    return compressed