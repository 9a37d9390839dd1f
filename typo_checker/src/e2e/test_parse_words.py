# src/e2e/test_parse_words.py

from spelling.words import parse_words


def test_lowercases_and_deduplicates():
    words = parse_words("Hello hello HELLO world, World!")
    assert sorted(words) == ["hello", "world"]
    assert all(w == w.lower() for w in words)


def test_drops_single_letters_and_numbers():
    assert parse_words("a 1 22 x9 b") == []


def test_splits_camel_case():
    assert sorted(parse_words("myVariableName = 3")) == ["my", "name", "variable"]


def test_acronym_between_non_word_characters():
    assert "xml" in parse_words("parse the XML file")
    assert "http" in parse_words("(HTTP)")


def test_acronym_glued_to_word_is_not_extracted():
    # only the capitalized word is recovered from "XMLParser"
    assert parse_words(" XMLParser ") == ["parser"]


def test_acronym_at_line_start_needs_leading_separator():
    assert parse_words("XML rocks") == ["rocks"]
    assert "xml" in parse_words(" XML rocks")


def test_adjacent_acronyms_share_a_separator():
    # the first match consumes the space between them
    assert parse_words(" XML HTML ") == ["xml"]


def test_reapplying_to_joined_output_is_stable():
    line = "The quickBrown fox jumpedOver (HTTP) lazy dogs"
    once = parse_words(line)
    twice = parse_words(" ".join(once))
    assert set(twice) == set(once)


def test_first_seen_order():
    assert parse_words("zebra apple zebra mango") == ["zebra", "apple", "mango"]
