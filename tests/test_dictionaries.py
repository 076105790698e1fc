from pathlib import Path

import pytest

from spellcheck_server.config import SpellcheckConfig
from spellcheck_server.dictionaries import (
    DictionaryLoadError,
    HunspellDictionary,
    WordListDictionary,
    build_dictionary_from_config,
    create_dictionary,
)
from spellcheck_server.dictionaries.wordlist import parse_word_lines
from tests.utils import write_hunspell_dictionary, write_word_list

SUFFIX_S = ["SFX S Y 1", "SFX S 0 s ."]


def test_parse_word_lines_tolerates_count_and_flags():
    lines = ["3", "hello/MS", "world", "run/GS po:verb", "", "# comment"]
    assert list(parse_word_lines(lines)) == ["hello", "world", "run"]


def test_parse_word_lines_keeps_numeric_entries_after_first_line():
    assert list(parse_word_lines(["apple", "42"])) == ["apple", "42"]


def test_word_list_is_case_insensitive_by_default():
    dictionary = WordListDictionary(["hello", "Paris"])
    assert dictionary.check("Hello")
    assert dictionary.check("HELLO")
    assert dictionary.check("paris")
    assert not dictionary.check("helo")


def test_case_sensitive_word_list():
    dictionary = WordListDictionary(["Paris"], case_sensitive=True)
    assert dictionary.check("Paris")
    assert not dictionary.check("paris")


def test_apostrophes_around_word_are_ignored():
    dictionary = WordListDictionary(["quoted", "isn't"])
    assert dictionary.check("'quoted'")
    assert dictionary.check("isn't")
    assert dictionary.check("'")
    assert not dictionary.check("'nope'")


def test_word_list_from_file(tmp_path: Path):
    path = write_word_list(tmp_path / "words.txt", ["hello", "world", "café"])
    dictionary = WordListDictionary.from_file(path)
    assert len(dictionary) == 3
    assert "café" in dictionary
    assert dictionary.check("World")


def test_missing_word_list_raises(tmp_path: Path):
    with pytest.raises(DictionaryLoadError):
        WordListDictionary.from_file(tmp_path / "missing.txt")


def test_hunspell_applies_affix_rules(tmp_path: Path):
    affix_path, dic_path = write_hunspell_dictionary(
        tmp_path, ["cat/S", "dog"], affix_rules=SUFFIX_S
    )
    dictionary = HunspellDictionary.from_files(dic_path, affix_path)
    assert dictionary.check("cat")
    assert dictionary.check("cats")
    assert dictionary.check("dog")
    assert not dictionary.check("dogs")
    assert not dictionary.check("cta")


def test_hunspell_strips_surrounding_apostrophes(tmp_path: Path):
    affix_path, dic_path = write_hunspell_dictionary(tmp_path, ["quoted"])
    dictionary = HunspellDictionary.from_files(dic_path, affix_path)
    assert dictionary.check("'quoted'")
    assert dictionary.check("'")
    assert not dictionary.check("'nope'")


def test_hunspell_accepts_files_with_different_stems(tmp_path: Path):
    affix_path, _ = write_hunspell_dictionary(
        tmp_path, ["unused"], affix_rules=SUFFIX_S, stem="rules"
    )
    _, dic_path = write_hunspell_dictionary(tmp_path, ["cat/S"], stem="words")
    dictionary = HunspellDictionary.from_files(dic_path, affix_path)
    assert dictionary.check("cats")


def test_hunspell_missing_affix_file_names_it(tmp_path: Path):
    _, dic_path = write_hunspell_dictionary(tmp_path, ["cat"])
    with pytest.raises(DictionaryLoadError, match="affix file"):
        HunspellDictionary.from_files(dic_path, tmp_path / "missing.aff")


def test_hunspell_missing_dictionary_file_raises(tmp_path: Path):
    affix_path, _ = write_hunspell_dictionary(tmp_path, ["cat"])
    with pytest.raises(DictionaryLoadError, match="dictionary file"):
        HunspellDictionary.from_files(tmp_path / "missing.dic", affix_path)


def test_create_dictionary_rejects_unknown_backend():
    with pytest.raises(ValueError):
        create_dictionary("nonexistent")


def test_build_dictionary_from_config_defaults_to_hunspell(tmp_path: Path):
    affix_path, dic_path = write_hunspell_dictionary(
        tmp_path, ["alpha/S", "beta"], affix_rules=SUFFIX_S
    )
    config = SpellcheckConfig(
        dictionary_path=str(dic_path), affix_path=str(affix_path)
    )
    dictionary = build_dictionary_from_config(config)
    assert isinstance(dictionary, HunspellDictionary)
    assert dictionary.check("alphas")
    assert not dictionary.check("gamma")


def test_build_word_list_dictionary_from_config(tmp_path: Path):
    path = write_word_list(tmp_path / "words.txt", ["Paris"])
    config = SpellcheckConfig(
        backend="wordlist", dictionary_path=str(path), case_sensitive=True
    )
    dictionary = build_dictionary_from_config(config)
    assert isinstance(dictionary, WordListDictionary)
    assert dictionary.check("Paris")
    assert not dictionary.check("paris")


class _FakeEnchantErrors:
    class DictNotFoundError(Exception):
        pass


class _FakeEnchantDict:
    def __init__(self, language: str, pwl: str | None = None) -> None:
        if language != "en_US":
            raise _FakeEnchantErrors.DictNotFoundError(language)
        self.language = language
        self.pwl = pwl

    def check(self, word: str) -> bool:
        return word in {"colour", "neighbour"}

    def suggest(self, word: str) -> list[str]:
        return ["colour"]


class _FakeEnchant:
    errors = _FakeEnchantErrors
    Dict = _FakeEnchantDict
    DictWithPWL = _FakeEnchantDict


def test_enchant_backend_delegates_checks(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        "spellcheck_server.dictionaries.enchant_dictionary.enchant", _FakeEnchant
    )
    dictionary = create_dictionary("enchant", language="en_US")
    assert dictionary.check("colour")
    assert not dictionary.check("colur")
    assert dictionary.suggest("colur") == ["colour"]


def test_enchant_backend_uses_personal_word_list(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        "spellcheck_server.dictionaries.enchant_dictionary.enchant", _FakeEnchant
    )
    config = SpellcheckConfig(backend="enchant", personal_word_list="words.pwl")
    dictionary = build_dictionary_from_config(config)
    assert dictionary._dict.pwl == "words.pwl"


def test_enchant_backend_unknown_language(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        "spellcheck_server.dictionaries.enchant_dictionary.enchant", _FakeEnchant
    )
    with pytest.raises(DictionaryLoadError):
        create_dictionary("enchant", language="xx_XX")
