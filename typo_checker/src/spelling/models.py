# src/spelling/models.py
"""
Data models for the spelling engine.

- TypoInfo: one misspelled word plus its suggestions (the cached unit).
- LineTypo: a TypoInfo located on a 0-based line of a checked text.
- MorphologyRule: one (predicate, transform) step of an inflection rule set.

These classes hold no business logic beyond small serialization helpers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, NamedTuple, Tuple


@dataclass(frozen=True, slots=True)
class TypoInfo:
    """
    A word that is not in the dictionary but has close dictionary neighbours.

    Attributes
    ----------
    word : str
        The lowercase word as extracted from the text.
    suggestions : Tuple[str, ...]
        Dictionary words within the configured edit distance, in the order
        the candidate generator discovered them, without duplicates.
    """
    word: str
    suggestions: Tuple[str, ...]

    def describe(self) -> str:
        return f"{self.word} is possibly typo. Did you mean: {','.join(self.suggestions)}"


class LineTypo(NamedTuple):
    line_index: int           # 0-based
    typo: TypoInfo

    def to_dict(self) -> dict:
        return {
            "line": self.line_index,
            "word": self.typo.word,
            "suggestions": list(self.typo.suggestions),
        }


@dataclass(frozen=True, slots=True)
class MorphologyRule:
    name: str
    matches: Callable[[str], bool]
    convert: Callable[[str], str]
