from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .config import SpellcheckConfig, load_config
from .diagnostics import find_misspellings
from .dictionaries import (
    DictionaryLoadError,
    SpellDictionary,
    build_dictionary_from_config,
)
from .tokenization import tokenize_words

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s]: %(message)s"

app = typer.Typer(help="Spell-checking language server CLI.", no_args_is_help=True)


@app.command()
def serve(
    config: Path | None = typer.Option(None, "--config", "-c"),
    dictionary: Path | None = typer.Option(
        None, "--dictionary", "-d", help="Dictionary (.dic or word list) file."
    ),
    affix: Path | None = typer.Option(
        None, "--affix", "-a", help="Hunspell affix (.aff) file."
    ),
    backend: str | None = typer.Option(
        None,
        "--backend",
        "-b",
        help="Dictionary backend ('hunspell', 'wordlist' or 'enchant').",
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Enchant language tag (e.g., en_US)."
    ),
) -> None:
    """Run the language server over stdio."""
    from .server import create_server

    cfg = load_config(config)
    _apply_dictionary_overrides(cfg, dictionary, affix, backend, language)
    _configure_logging(cfg.log_level)
    spell_dictionary = _load_dictionary(cfg)
    server = create_server(cfg, spell_dictionary)
    LOGGER.info("Starting spellcheck server on stdio")
    server.start_io()


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    dictionary: Path | None = typer.Option(
        None, "--dictionary", "-d", help="Dictionary (.dic or word list) file."
    ),
    affix: Path | None = typer.Option(
        None, "--affix", "-a", help="Hunspell affix (.aff) file."
    ),
    backend: str | None = typer.Option(
        None,
        "--backend",
        "-b",
        help="Dictionary backend ('hunspell', 'wordlist' or 'enchant').",
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Enchant language tag (e.g., en_US)."
    ),
) -> None:
    """Spell-check files and emit a JSON summary of misspelled words."""
    cfg = load_config(config)
    _apply_dictionary_overrides(cfg, dictionary, affix, backend, language)
    _configure_logging(cfg.log_level)
    spell_dictionary = _load_dictionary(cfg)
    documents = _load_documents(input_path)
    summary: List[DocumentSummary] = []
    for doc_id, text in documents:
        words = find_misspellings(text, spell_dictionary)
        summary.append(
            {
                "doc_id": doc_id,
                "misspellings": [word.to_dict() for word in words],
            }
        )
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def tokens(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
) -> None:
    """Print the words of a file with their line/character ranges."""
    text = _read_text(input_path)
    words = tokenize_words(text)
    typer.echo(json.dumps([word.to_dict() for word in words], indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = SpellcheckConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


class DocumentSummary(TypedDict):
    doc_id: str
    misspellings: List[Dict[str, object]]


# File types the check command expands from directories.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".rst"}


def _configure_logging(level: str) -> None:
    """Send log records to stderr; stdout is reserved for protocol traffic."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
    )


def _apply_dictionary_overrides(
    config: SpellcheckConfig,
    dictionary: Path | None,
    affix: Path | None,
    backend: str | None,
    language: str | None,
) -> None:
    """Apply CLI overrides to dictionary-related config fields when provided."""
    if dictionary:
        config.dictionary_path = str(dictionary)
    if affix:
        config.affix_path = str(affix)
    if backend:
        config.backend = backend
    if language:
        config.language = language


def _load_dictionary(config: SpellcheckConfig) -> SpellDictionary:
    """Build the configured dictionary or exit with an error message."""
    try:
        return build_dictionary_from_config(config)
    except (DictionaryLoadError, ImportError, ValueError) as exc:
        LOGGER.error("Unable to create dictionary: %s", exc)
        typer.echo(f"Unable to create dictionary: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _load_documents(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, _read_text(input_path))]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [(str(file.relative_to(input_path)), _read_text(file)) for file in files]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text") from exc


if __name__ == "__main__":
    main()
