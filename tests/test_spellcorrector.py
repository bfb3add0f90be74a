import pytest

from obvtools.spellcorrector import SpellCorrector, levenshtein_distance


def test_classic_distance():
    assert levenshtein_distance("kitten", "sitting", 100) == 3


@pytest.mark.parametrize("word", ["", "a", "GND", "PPBUS_G3H"])
def test_distance_to_self_is_zero(word):
    assert levenshtein_distance(word, word, len(word)) == 0


@pytest.mark.parametrize("other", ["", "abc", "abcdef"])
def test_distance_from_empty_is_length(other):
    assert levenshtein_distance("", other, 100) == len(other)


@pytest.mark.parametrize("a,b", [("flaw", "lawn"), ("gnd", "vcc"), ("net", "nets")])
def test_distance_symmetric(a, b):
    assert levenshtein_distance(a, b, 100) == levenshtein_distance(b, a, 100)


@pytest.mark.parametrize("limit", [0, 2, 4, 10])
def test_limit_truncates_second(limit):
    second = "abcdefgh"
    assert levenshtein_distance("abc", second, limit) == levenshtein_distance(
        "abc", second[:limit], 100
    )


def test_exact_match_first_case_insensitive():
    corrector = SpellCorrector(["VCC", "GND", "GNDA"])
    result = corrector.suggest("gnd")
    assert result[0] == "GND"
    assert "GNDA" in result


def test_far_words_excluded():
    corrector = SpellCorrector(["PPBUS_G3H", "GND"])
    assert corrector.suggest("gnd") == ["GND"]


def test_distance_equal_threshold_excluded():
    corrector = SpellCorrector(["xyz"], threshold=3)
    assert corrector.suggest("abc") == []


def test_empty_dictionary():
    assert SpellCorrector().suggest("anything") == []