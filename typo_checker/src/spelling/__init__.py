"""
Spelling Support Engine

Finds likely misspelled words in text by looking every word up in a dictionary
built from a word list (plus optional domain keywords) and, on a miss, listing
the dictionary words within a small edit distance.

The package is split by concern:
- morphology: past tense / progressive / plural rules that widen the word list
- dictionary: word-list loading into an immutable Dictionary
- words: word extraction from a line, including all-caps runs
- candidates: brute-force edit-distance candidate generation
- engine: TypoChecker, which combines the above with a per-checker cache

Example Usage:
    from spelling import TypoChecker, format_report

    checker = TypoChecker(dictionary_file="/usr/share/dict/words",
                          keyword_file="keywords.txt")
    print(format_report(checker.check_file("README.txt")))
"""

# src/spelling/__init__.py
from .candidates import generate_candidates
from .dictionary import Dictionary, make_dictionary
from .engine import TypoChecker, format_report
from .errors import ConfigurationError, SpellingError
from .models import LineTypo, TypoInfo
from .morphology import (
    PAST_TENSE_RULES,
    PLURAL_FORM_RULES,
    PRESENT_PROGRESSIVE_TENSE_RULES,
    convert_word,
    word_variations,
)
from .words import parse_words

__version__ = "1.0.0"
__all__ = [
    "TypoChecker", "format_report", "Dictionary", "make_dictionary",
    "parse_words", "generate_candidates", "convert_word", "word_variations",
    "PAST_TENSE_RULES", "PRESENT_PROGRESSIVE_TENSE_RULES", "PLURAL_FORM_RULES",
    "TypoInfo", "LineTypo", "ConfigurationError", "SpellingError",
]
