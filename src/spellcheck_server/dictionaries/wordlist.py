from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .base import DictionaryLoadError, SpellDictionary

LOGGER = logging.getLogger(__name__)


class WordListDictionary(SpellDictionary):
    """
    Dictionary backed by a flat set of accepted words.

    Meant for plain word lists; every accepted form must be listed. Use the
    hunspell backend for ``.aff``/``.dic`` pairs.
    """

    def __init__(self, words: Iterable[str], case_sensitive: bool = False) -> None:
        self.case_sensitive = case_sensitive
        self._words = {word for word in words if word}
        self._folded = (
            set() if case_sensitive else {word.lower() for word in self._words}
        )

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.check(word)

    def check(self, word: str) -> bool:
        stripped = word.strip("'")
        if not stripped:
            return True
        for candidate in dict.fromkeys((word, stripped)):
            if candidate in self._words:
                return True
            if not self.case_sensitive and candidate.lower() in self._folded:
                return True
        return False

    @classmethod
    def from_file(
        cls, path: str | Path, case_sensitive: bool = False
    ) -> WordListDictionary:
        """Load a UTF-8 word list, one word per line."""
        list_path = Path(path)
        try:
            contents = list_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DictionaryLoadError(
                f"Unable to open word list {list_path}: {exc}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise DictionaryLoadError(
                f"Word list {list_path} is not valid UTF-8"
            ) from exc
        words = list(parse_word_lines(contents.splitlines()))
        LOGGER.info("Loaded %d words from %s", len(words), list_path)
        return cls(words, case_sensitive=case_sensitive)


def parse_word_lines(lines: Iterable[str]) -> Iterable[str]:
    """Yield the words of a word list, skipping blanks and ``#`` comments.

    A leading entry count and ``/FLAGS`` suffixes are tolerated so a bare
    ``.dic`` file can be used as a list of stems.
    """
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if index == 0 and line.isdigit():
            continue
        entry = line.split(None, 1)[0]
        word = entry.split("/", 1)[0]
        if word:
            yield word
