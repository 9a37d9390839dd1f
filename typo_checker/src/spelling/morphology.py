"""
Inflection rules used to widen the dictionary.

Each rule set is an ordered tuple of MorphologyRule; convert_word() applies the
first rule whose predicate accepts the word. The last rule of every set accepts
anything, so a conversion always happens.
"""
from __future__ import annotations
import re
import string
from typing import List, Sequence

from .models import MorphologyRule

ALPHABETS: str = string.ascii_lowercase
VOWELS: str = "aiueo"
CONSONANTS: str = "".join(a for a in ALPHABETS if a not in VOWELS)

_CVC_END = re.compile(rf"[{CONSONANTS}][{VOWELS}][{CONSONANTS}]$")
_CONSONANT_Y_END = re.compile(rf"[{CONSONANTS}]y$")
_F_END = re.compile(r"(f|fe)$")
_SIBILANT_END = re.compile(r"(s|sh|ch|x)$")


def _always(word: str) -> bool:
    return True


# enter -> enterred, chop -> chopped, study -> studied, like -> liked
PAST_TENSE_RULES: Sequence[MorphologyRule] = (
    MorphologyRule("double-consonant", lambda w: bool(_CVC_END.search(w)), lambda w: f"{w}{w[-1]}ed"),
    MorphologyRule("consonant-y", lambda w: bool(_CONSONANT_Y_END.search(w)), lambda w: f"{w[:-1]}ied"),
    MorphologyRule("silent-e", lambda w: w.endswith("e"), lambda w: f"{w}d"),
    MorphologyRule("default", _always, lambda w: f"{w}ed"),
)

# lie -> lying, chop -> chopping, love -> loving
PRESENT_PROGRESSIVE_TENSE_RULES: Sequence[MorphologyRule] = (
    MorphologyRule("ie", lambda w: w.endswith("ie"), lambda w: f"{w[:-2]}ying"),
    MorphologyRule("double-consonant", lambda w: bool(_CVC_END.search(w)), lambda w: f"{w}{w[-1]}ing"),
    MorphologyRule("silent-e", lambda w: w.endswith("e"), lambda w: f"{w[:-1]}ing"),
    MorphologyRule("default", _always, lambda w: f"{w}ing"),
)

# knife -> knives, baby -> babies, brush -> brushes
PLURAL_FORM_RULES: Sequence[MorphologyRule] = (
    MorphologyRule("f-ves", lambda w: bool(_F_END.search(w)), lambda w: f"{_F_END.sub('', w)}ves"),
    MorphologyRule("consonant-y", lambda w: bool(_CONSONANT_Y_END.search(w)), lambda w: f"{w[:-1]}ies"),
    MorphologyRule("sibilant", lambda w: bool(_SIBILANT_END.search(w)), lambda w: f"{w}es"),
    MorphologyRule("default", _always, lambda w: f"{w}s"),
)


def convert_word(rules: Sequence[MorphologyRule], word: str) -> str:
    """Apply the first matching rule of `rules` to `word`."""
    for rule in rules:
        if rule.matches(word):
            return rule.convert(word)
    # every shipped rule set ends with a catch-all
    raise ValueError(f"no rule matched {word!r}")


def word_variations(word: str) -> List[str]:
    """Past tense, present progressive and plural forms of `word`, in that order."""
    return [
        convert_word(PAST_TENSE_RULES, word),
        convert_word(PRESENT_PROGRESSIVE_TENSE_RULES, word),
        convert_word(PLURAL_FORM_RULES, word),
    ]
