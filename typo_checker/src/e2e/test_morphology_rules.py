# src/e2e/test_morphology_rules.py

import pytest

from spelling.morphology import (
    CONSONANTS,
    PAST_TENSE_RULES,
    PLURAL_FORM_RULES,
    PRESENT_PROGRESSIVE_TENSE_RULES,
    VOWELS,
    convert_word,
    word_variations,
)


@pytest.mark.parametrize("word, expected", [
    ("chop", "chopped"),
    ("study", "studied"),
    ("like", "liked"),
    ("enter", "enterred"),   # no stress awareness: CVC ending always doubles
    ("walk", "walked"),
    ("play", "playyed"),     # y counts as a consonant
])
def test_past_tense(word, expected):
    assert convert_word(PAST_TENSE_RULES, word) == expected


@pytest.mark.parametrize("word, expected", [
    ("lie", "lying"),
    ("chop", "chopping"),
    ("love", "loving"),
    ("walk", "walking"),
])
def test_present_progressive(word, expected):
    assert convert_word(PRESENT_PROGRESSIVE_TENSE_RULES, word) == expected


@pytest.mark.parametrize("word, expected", [
    ("knife", "knives"),
    ("leaf", "leaves"),
    ("baby", "babies"),
    ("brush", "brushes"),
    ("church", "churches"),
    ("box", "boxes"),
    ("bus", "buses"),
    ("cat", "cats"),
    ("day", "days"),
])
def test_plural(word, expected):
    assert convert_word(PLURAL_FORM_RULES, word) == expected


def test_first_matching_rule_wins():
    # "tie" ends in "e" too, but the "ie" rule is listed first
    assert convert_word(PRESENT_PROGRESSIVE_TENSE_RULES, "tie") == "tying"


def test_every_rule_set_ends_with_catch_all():
    for rules in (PAST_TENSE_RULES, PRESENT_PROGRESSIVE_TENSE_RULES, PLURAL_FORM_RULES):
        assert rules[-1].matches("")
        assert rules[-1].matches("zzz")


def test_convert_does_not_touch_input():
    word = "study"
    convert_word(PAST_TENSE_RULES, word)
    assert word == "study"


def test_word_variations_order():
    assert word_variations("chop") == ["chopped", "chopping", "chops"]


def test_letter_classes():
    assert len(VOWELS) + len(CONSONANTS) == 26
    assert "y" in CONSONANTS and "w" in CONSONANTS
    assert not set(VOWELS) & set(CONSONANTS)
