import os

MIN_WORD_LEN: int = 5
LEVENSHTEIN_DISTANCE: int = 1

# word list shipped with most linux/osx installs
DEFAULT_DICTIONARY_FILE: str = os.environ.get("TYPOCHECKER_DICTIONARY", "/usr/share/dict/words")
ENCODING: str = "utf-8"

# /* ~~~ candidate generation grows ~(53n)^d; warn past this distance ~~~ */
DISTANCE_WARN_THRESHOLD: int = 2

# debug progress while loading big word lists
PROGRESS_EVERY_WORDS: int = 50_000
