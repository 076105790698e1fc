from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import DictionaryLoadError, SpellDictionary
from .enchant_dictionary import EnchantDictionary
from .hunspell_dictionary import HunspellDictionary
from .wordlist import WordListDictionary

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import SpellcheckConfig

__all__ = [
    "DictionaryLoadError",
    "SpellDictionary",
    "EnchantDictionary",
    "HunspellDictionary",
    "WordListDictionary",
    "create_dictionary",
    "build_dictionary_from_config",
]


def create_dictionary(name: str, **kwargs: Any) -> SpellDictionary:
    """Factory for building dictionaries by backend name."""
    normalized = name.lower().strip()
    if normalized == "hunspell":
        return HunspellDictionary.from_files(**kwargs)
    if normalized == "wordlist":
        return WordListDictionary.from_file(**kwargs)
    if normalized == "enchant":
        return EnchantDictionary(**kwargs)
    raise ValueError(f"Unknown dictionary backend '{name}'.")


def build_dictionary_from_config(config: "SpellcheckConfig") -> SpellDictionary:
    """Convenience helper to build a dictionary from SpellcheckConfig."""
    normalized = config.backend.lower().strip()
    if normalized == "enchant":
        return create_dictionary(
            config.backend,
            language=config.language,
            personal_word_list=config.personal_word_list,
        )
    if normalized == "wordlist":
        return create_dictionary(
            config.backend,
            path=config.dictionary_path,
            case_sensitive=config.case_sensitive,
        )
    return create_dictionary(
        config.backend,
        dictionary_path=config.dictionary_path,
        affix_path=config.affix_path,
    )
