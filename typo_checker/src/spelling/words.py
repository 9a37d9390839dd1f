from __future__ import annotations
import re
from typing import List

# a letter followed by lowercase letters: "Hello", "world", the "Parser" of "XMLParser"
_WORD = re.compile(r"[a-zA-Z][a-z]+")

# an all-caps run between non-word characters: " XML ", "(HTTP)"
_ACRONYM = re.compile(r"\W([A-Z]+)\W", re.ASCII)


def parse_words(line: str) -> List[str]:
    """
    Extract candidate words from a line of text.

    Returns lowercase words without duplicates, in first-seen order. Natural
    words come first, then acronyms. An uppercase run glued to a following
    capitalized word ("XMLParser") only contributes the capitalized word;
    the run itself is picked up only when non-word characters surround it.
    """
    found = [m.lower() for m in _WORD.findall(line)]
    found += [m.lower() for m in _ACRONYM.findall(line)]
    return list(dict.fromkeys(found))
