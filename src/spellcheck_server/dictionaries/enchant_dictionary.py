from __future__ import annotations

import importlib
from typing import Any, cast

from .base import DictionaryLoadError, SpellDictionary

enchant: Any | None = None


class EnchantDictionary(SpellDictionary):
    """
    Adapter around a PyEnchant dictionary.

    Uses whatever providers the local Enchant installation offers (Hunspell,
    Nuspell, Aspell). A personal word list, when given, is consulted as well.
    """

    def __init__(self, language: str, personal_word_list: str | None = None) -> None:
        enchant_module = _ensure_enchant()
        try:
            if personal_word_list:
                self._dict = enchant_module.DictWithPWL(language, personal_word_list)
            else:
                self._dict = enchant_module.Dict(language)
        except enchant_module.errors.DictNotFoundError as exc:
            raise DictionaryLoadError(
                f"No Enchant dictionary available for language '{language}'"
            ) from exc
        self.language = language

    def check(self, word: str) -> bool:
        return bool(self._dict.check(word))

    def suggest(self, word: str) -> list[str]:
        return [str(item) for item in self._dict.suggest(word)]


def _ensure_enchant() -> Any:
    global enchant
    if enchant is not None:
        return enchant
    try:  # pragma: no cover - import guard
        enchant_module = cast(Any, importlib.import_module("enchant"))
    except Exception as exc:  # pragma: no cover - import guard
        raise ImportError(
            "PyEnchant and the Enchant C library are required for EnchantDictionary. "
            "Install the 'enchant' extra via `pip install .[enchant]`."
        ) from exc
    enchant = enchant_module
    return enchant
