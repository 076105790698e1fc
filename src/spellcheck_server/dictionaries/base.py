from __future__ import annotations

from abc import ABC, abstractmethod


class DictionaryLoadError(RuntimeError):
    """Raised when a dictionary cannot be loaded."""


class SpellDictionary(ABC):
    """Abstract dictionary that decides whether a word is spelled correctly."""

    @abstractmethod
    def check(self, word: str) -> bool:
        """Return True when ``word`` is spelled correctly."""
        raise NotImplementedError
