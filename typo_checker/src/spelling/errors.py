from __future__ import annotations


class SpellingError(Exception):
    """Base class for errors raised by the spelling engine."""


class ConfigurationError(SpellingError):
    """A required word list is missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot load word list {path!r}: {reason}")
        self.path = path
        self.reason = reason
