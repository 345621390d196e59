import pytest

from ctcikit.strings import (
    check_permutation,
    compress_string,
    is_unique,
    one_away,
    palindrome_permutation,
    urlify,
)


def test_is_unique_true():
    assert is_unique("Daniel") is True


def test_is_unique_false():
    assert is_unique("Danny") is False


def test_is_unique_empty():
    assert is_unique("") is True


def test_check_permutation_true():
    assert check_permutation("Daniel", "lDnaei") is True


def test_check_permutation_false():
    assert check_permutation("Danny", "Rust") is False


def test_check_permutation_is_case_sensitive():
    assert check_permutation("abc", "ABC") is False


def test_check_permutation_same_length_different_counts():
    assert check_permutation("aab", "abb") is False


def test_urlify():
    assert urlify("Cracking the coding interview") == "Cracking%20the%20coding%20interview"


def test_urlify_without_spaces():
    assert urlify("nospaces") == "nospaces"


def test_palindrome_permutation_true():
    assert palindrome_permutation("tacostacostacostacos") is True


def test_palindrome_permutation_false():
    assert palindrome_permutation("Danny") is False


def test_palindrome_permutation_ignores_spaces_and_case():
    assert palindrome_permutation("Tact Coa") is True


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("CtCI", "CCI", True),
        ("Gayle", "Gle", False),
        ("Gayle", "Gayle", False),
        ("Daniel", "Daniela", True),
    ],
)
def test_one_away(s1, s2, expected):
    assert one_away(s1, s2) is expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("aabcccccaaa", "a2b1c5a3"),
        ("aabbcc", "aabbcc"),
        ("Cracking the Coding Interview", "Cracking the Coding Interview"),
        ("!!!!lllbbajjjjjjjjjjjjjpppp", "!4l3b2a1j13p4"),
    ],
)
def test_compress_string(source, expected):
    assert compress_string(source) == expected


def test_compress_empty_string():
    assert compress_string("") == ""


def test_compress_single_character_keeps_original():
    assert compress_string("a") == "a"