from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from spylls.hunspell import Dictionary

from .base import DictionaryLoadError, SpellDictionary

LOGGER = logging.getLogger(__name__)


class HunspellDictionary(SpellDictionary):
    """
    Hunspell dictionary built from an ``.aff``/``.dic`` pair with spylls.

    Affix rules, compounding and capitalization handling all come from the
    affix file, so inflected forms of listed stems are accepted.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary

    def check(self, word: str) -> bool:
        stripped = word.strip("'")
        if not stripped:
            return True
        if self._dictionary.lookup(word):
            return True
        return stripped != word and bool(self._dictionary.lookup(stripped))

    def suggest(self, word: str) -> list[str]:
        return list(self._dictionary.suggest(word))

    @classmethod
    def from_files(
        cls, dictionary_path: str | Path, affix_path: str | Path
    ) -> HunspellDictionary:
        """Load the dictionary and affix files, which may use different stems."""
        dic_path = Path(dictionary_path)
        aff_path = Path(affix_path)
        if not aff_path.is_file():
            raise DictionaryLoadError(f"Unable to open affix file {aff_path}")
        if not dic_path.is_file():
            raise DictionaryLoadError(f"Unable to open dictionary file {dic_path}")

        if aff_path.with_suffix("") == dic_path.with_suffix(""):
            dictionary = _read_pair(str(dic_path.with_suffix("")))
        else:
            # spylls expects <stem>.aff and <stem>.dic side by side.
            with tempfile.TemporaryDirectory() as tmp:
                stem = Path(tmp) / "index"
                shutil.copyfile(aff_path, stem.with_suffix(".aff"))
                shutil.copyfile(dic_path, stem.with_suffix(".dic"))
                dictionary = _read_pair(str(stem))
        LOGGER.info("Loaded Hunspell dictionary %s with affixes %s", dic_path, aff_path)
        return cls(dictionary)


def _read_pair(stem: str) -> Dictionary:
    try:
        return Dictionary.from_files(stem)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(
            f"Unable to create dictionary from {stem}.aff/{stem}.dic: {exc}"
        ) from exc
