"""
Word-list loading.

make_dictionary() reads a primary word list (one word per line) and an optional
keyword list, normalizes every line (trim + lowercase) and stores each word
together with its past tense, present progressive and plural forms. Original
and derived entries are indistinguishable afterwards.

The resulting Dictionary is immutable; membership is an O(1) set lookup on the
lowercase key space.
"""
from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, Optional, Set, Union

from . import config as CFG
from .errors import ConfigurationError
from .morphology import word_variations

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Dictionary:
    """Read-only set of known lowercase words (base words and their variants)."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words):,} words)"


def load_word_list_file(words: Set[str], word_list_file: PathLike) -> int:
    """
    Add every word of `word_list_file` plus its variations to `words`.

    Returns the number of non-blank lines read. Raises ConfigurationError if the
    file cannot be opened or read.
    """
    path = os.fspath(word_list_file)
    count = 0
    try:
        with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
            for line in f:
                word = line.strip().lower()
                if not word:
                    continue
                words.add(word)
                words.update(word_variations(word))
                count += 1
                if count % CFG.PROGRESS_EVERY_WORDS == 0:
                    log.debug("[loading] %s words=%d", path, count)
    except OSError as exc:
        raise ConfigurationError(path, exc.strerror or str(exc)) from exc
    log.info("Loaded %d words from %s", count, path)
    return count


def make_dictionary(dictionary_file: PathLike, keyword_file: Optional[PathLike] = None) -> Dictionary:
    """Build a Dictionary from a word list and an optional keyword list."""
    words: Set[str] = set()
    load_word_list_file(words, dictionary_file)
    if keyword_file:
        load_word_list_file(words, keyword_file)
    return Dictionary(words)
