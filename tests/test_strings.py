import pytest

from contestsolvers.strings import (
    abbreviate,
    assemble_word,
    bit_plus_plus,
    boy_or_girl,
    capitalize_word,
    compare_ignore_case,
    count_xxx,
    fix_case,
    helpful_maths,
)


def test_compare_equal_ignoring_case():
    assert compare_ignore_case("aaaa", "aaaA") == 0


@pytest.mark.parametrize("a,b", [("abs", "Abz"), ("abcdefg", "AbCdEfF"[::-1]), ("a", "B")])
def test_compare_is_antisymmetric(a, b):
    assert compare_ignore_case(a, b) == -compare_ignore_case(b, a)
    assert compare_ignore_case(a, b) in (-1, 1)


def test_compare_less():
    assert compare_ignore_case("abs", "Abz") == -1


def test_boy_or_girl():
    assert boy_or_girl("wjmzbmr") == "CHAT WITH HER!"
    assert boy_or_girl("xiaodao") == "IGNORE HIM!"


def test_capitalize_keeps_tail():
    word = "konjac"
    result = capitalize_word(word)
    assert result[0] == "K"
    assert result[1:] == word[1:]
    assert capitalize_word("ApPLe") == "ApPLe"


@pytest.mark.parametrize("word", ["HoUse", "maTRIx", "ViP", "a", "Z"])
def test_fix_case_is_uniform(word):
    result = fix_case(word)
    assert result.lower() == word.lower()
    assert result in (word.lower(), word.upper())
    lower = sum(c.islower() for c in word)
    upper = sum(c.isupper() for c in word)
    assert result == (word.lower() if lower >= upper else word.upper())


def test_abbreviate_short_word_unchanged():
    assert abbreviate("word") == "word"
    assert abbreviate("abcdefghij") == "abcdefghij"


@pytest.mark.parametrize("word", ["localization", "internationalization", "abcdefghijk"])
def test_abbreviate_long_word(word):
    result = abbreviate(word)
    assert result[0] == word[0]
    assert result[-1] == word[-1]
    assert int(result[1:-1]) == len(word) - 2


def test_count_xxx_examples():
    assert count_xxx("xxxiii") == 1
    assert count_xxx("xxoxx") == 0


@pytest.mark.parametrize("n", [3, 5, 10])
def test_count_xxx_overlapping(n):
    assert count_xxx("x" * n) == n - 2


def test_assemble_word_append_and_prepend():
    assert assemble_word("ab", "cd", "DD") == "abcd"
    assert assemble_word("ab", "cd", "VV") == "dcab"
    assert assemble_word("ab", "cd", "??") == "ab"


def test_bit_plus_plus():
    assert bit_plus_plus(["++X"]) == 1
    assert bit_plus_plus(["X++", "--X"]) == 0
    assert bit_plus_plus([]) == 0
    assert bit_plus_plus(["X--"] * 3) == -3


def test_helpful_maths_single():
    assert helpful_maths("2") == "2"


@pytest.mark.parametrize("expr", ["3+2+1", "1+1+3+1+3", "2+2+1+3+2"])
def test_helpful_maths_sorted(expr):
    result = helpful_maths(expr)
    parts = result.split("+")
    assert parts == sorted(expr.split("+"))