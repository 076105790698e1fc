"""
spellcheck_server package exports convenience helpers for library consumers.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import SpellcheckConfig, config_from_dict, config_from_yaml, load_config
from .diagnostics import find_misspellings, make_diagnostics
from .dictionaries import build_dictionary_from_config, create_dictionary
from .models import Position, Range, Word
from .tokenization import CharPosStream, WordTokenizer, tokenize_words

__all__ = [
    "SpellcheckConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "create_dictionary",
    "build_dictionary_from_config",
    "find_misspellings",
    "make_diagnostics",
    "Position",
    "Range",
    "Word",
    "CharPosStream",
    "WordTokenizer",
    "tokenize_words",
]
