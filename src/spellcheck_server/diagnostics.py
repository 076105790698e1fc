from __future__ import annotations

import logging
from typing import List

from lsprotocol import types as lsp

from .dictionaries import SpellDictionary
from .models import Range, Word
from .tokenization import WordTokenizer

LOGGER = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Incorrect spelling"
DEFAULT_SOURCE = "spellcheck"

SEVERITY_BY_NAME = {
    "error": lsp.DiagnosticSeverity.Error,
    "warning": lsp.DiagnosticSeverity.Warning,
    "information": lsp.DiagnosticSeverity.Information,
    "hint": lsp.DiagnosticSeverity.Hint,
}


def severity_from_name(name: str) -> lsp.DiagnosticSeverity:
    """Map a configured severity name onto the protocol enum."""
    try:
        return SEVERITY_BY_NAME[name.lower().strip()]
    except KeyError as exc:
        raise ValueError(f"Unknown severity '{name}'.") from exc


def find_misspellings(text: str, dictionary: SpellDictionary) -> List[Word]:
    """Return every word in ``text`` that the dictionary rejects."""
    tokenizer = WordTokenizer.from_text(text)
    if tokenizer is None:
        return []
    misspelled: List[Word] = []
    checked = 0
    for word in tokenizer:
        checked += 1
        if not dictionary.check(word.text):
            misspelled.append(word)
    LOGGER.debug("Checked %d words, %d misspelled", checked, len(misspelled))
    return misspelled


def to_lsp_range(span: Range) -> lsp.Range:
    return lsp.Range(
        start=lsp.Position(line=span.start.line, character=span.start.character),
        end=lsp.Position(line=span.end.line, character=span.end.character),
    )


def make_diagnostics(
    text: str,
    dictionary: SpellDictionary,
    *,
    message: str = DEFAULT_MESSAGE,
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
    source: str = DEFAULT_SOURCE,
) -> List[lsp.Diagnostic]:
    """Build one diagnostic per misspelled word in ``text``."""
    return [
        lsp.Diagnostic(
            range=to_lsp_range(word.range),
            message=message,
            severity=severity,
            source=source,
        )
        for word in find_misspellings(text, dictionary)
    ]
