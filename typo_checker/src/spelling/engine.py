# spelling/engine.py
from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, List, Optional, Tuple

from . import candidates
from . import config as CFG
from .dictionary import Dictionary, PathLike, make_dictionary
from .models import LineTypo, TypoInfo
from .words import parse_words

log = logging.getLogger(__name__)


class TypoChecker:
    """
    Finds possible typos in lines/files and suggests dictionary words for them.

    Glues together:
      - the Dictionary (built once at construction, read-only afterwards),
      - word extraction (words.parse_words),
      - candidate generation (candidates.generate_candidates),
      - a per-instance cache of resolved typos.

    Public API (used by the CLI, the Flask API and the GUI):
      * find_typo(word):   TypoInfo or None
      * check_line(line):  [TypoInfo]
      * check_file(path):  [LineTypo] with 0-based line indices
      * report_file(path): formatted report text

    A word without any dictionary neighbour inside the edit distance is not
    reported at all; only near-misses count as typos.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        min_word_len: int = CFG.MIN_WORD_LEN,
        levenshtein_distance: int = CFG.LEVENSHTEIN_DISTANCE,
        dictionary_file: PathLike = CFG.DEFAULT_DICTIONARY_FILE,
        keyword_file: Optional[PathLike] = None,
        dictionary: Optional[Dictionary] = None,
    ) -> None:
        if min_word_len < 1:
            raise ValueError(f"min_word_len must be >= 1, got {min_word_len}")
        if levenshtein_distance < 1:
            raise ValueError(f"levenshtein_distance must be >= 1, got {levenshtein_distance}")
        if levenshtein_distance > CFG.DISTANCE_WARN_THRESHOLD:
            log.warning("Edit distance %d generates candidates exhaustively; expect very slow checks",
                        levenshtein_distance)

        self.min_word_len = int(min_word_len)
        self.levenshtein_distance = int(levenshtein_distance)
        if dictionary is None:
            dictionary = make_dictionary(dictionary_file, keyword_file)
        self._dictionary: Dictionary = dictionary
        self._typo_cache: Dict[str, Tuple[str, ...]] = {}
        log.info("TypoChecker ready: words=%d min_word_len=%d distance=%d",
                 len(self._dictionary), self.min_word_len, self.levenshtein_distance)

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def cache_size(self) -> int:
        return len(self._typo_cache)

    # ------------- checks -------------

    def check_file(self, file_name: PathLike) -> List[LineTypo]:
        """Check a text file line by line. I/O errors propagate to the caller."""
        path = os.fspath(file_name)
        with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
            found = self.check_lines(f)
        log.info("Checked %s: %d possible typos", path, len(found))
        return found

    def check_text(self, text: str) -> List[LineTypo]:
        return self.check_lines(text.splitlines(keepends=True))

    def check_lines(self, lines: Iterable[str]) -> List[LineTypo]:
        found: List[LineTypo] = []
        for line_count, line in enumerate(lines):
            for typo in self.check_line(line):
                found.append(LineTypo(line_count, typo))
        return found

    def check_line(self, line: str) -> List[TypoInfo]:
        """Typos among the words of `line` that are at least min_word_len long."""
        typos: List[TypoInfo] = []
        for word in parse_words(line):
            if len(word) < self.min_word_len:
                continue
            typo = self.find_typo(word)
            if typo is not None:
                typos.append(typo)
        return typos

    def find_typo(self, word: str) -> Optional[TypoInfo]:
        """
        Return a TypoInfo with suggestions if `word` looks like a typo, else None.

        Known words and words with no dictionary neighbour return None. Positive
        results are cached for the life of this checker.
        """
        if word in self._dictionary:
            return None
        cached = self._typo_cache.get(word)
        if cached is not None:
            return TypoInfo(word, cached)

        suggestions = tuple(
            w for w in candidates.generate_candidates(word, self.levenshtein_distance, self.min_word_len)
            if w in self._dictionary
        )
        if not suggestions:
            return None

        self._typo_cache[word] = suggestions
        return TypoInfo(word, suggestions)

    # ------------- reporting -------------

    def report_file(self, file_name: PathLike) -> str:
        return format_report(self.check_file(file_name))


def format_report(found: Iterable[LineTypo]) -> str:
    """One '<line>: <word> is possibly typo. Did you mean: a,b' line per typo."""
    return "".join(f"{lt.line_index}: {lt.typo.describe()}\n" for lt in found)
