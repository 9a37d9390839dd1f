"""
Brute-force edit-distance candidate generation.

generate_candidates(word, d) lists every string reachable from `word` with d
single-letter edits (delete, insert a..z, substitute a..z). Nothing is pruned
during generation; callers filter the result against a dictionary.

Size: a word of length n has about 53n + 26 distance-1 candidates, so distance 2
is in the tens of thousands for ordinary words and distance 3 in the millions.
"""
from __future__ import annotations
from typing import Dict, List

from . import config as CFG
from .morphology import ALPHABETS


def levenshtein_delete(word: str) -> List[str]:
    """Words with one character removed."""
    return list(dict.fromkeys(word[:i] + word[i + 1:] for i in range(len(word))))


def levenshtein_create(word: str) -> List[str]:
    """Words with one letter inserted, letter-major order."""
    return list(dict.fromkeys(
        word[:i] + a + word[i:]
        for a in ALPHABETS
        for i in range(len(word) + 1)
    ))


def levenshtein_modify(word: str) -> List[str]:
    """Words with one character replaced by a different letter."""
    return list(dict.fromkeys(
        word[:i] + a + word[i + 1:]
        for a in ALPHABETS
        for i in range(len(word))
        if word[i] != a
    ))


def generate_candidates(word: str, distance: int = 1, min_word_len: int = CFG.MIN_WORD_LEN) -> List[str]:
    """
    All strings within `distance` edits of `word`, excluding `word` itself.

    Deletions are skipped for words of `min_word_len` characters or fewer.
    Order is discovery order: deletions, insertions, substitutions, then for
    distance > 1 the expansions of each of those in turn.
    """
    if distance < 1:
        raise ValueError(f"distance must be >= 1, got {distance}")

    words = [] if len(word) <= min_word_len else levenshtein_delete(word)
    words += levenshtein_create(word)
    words += levenshtein_modify(word)

    if distance > 1:
        seen: Dict[str, None] = {}
        for w in words:
            seen.update(dict.fromkeys(generate_candidates(w, distance - 1, min_word_len)))
        words = list(seen)

    return [w for w in dict.fromkeys(words) if w != word]
