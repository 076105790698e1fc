from __future__ import annotations

import logging
from typing import Any

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from . import __version__
from .config import SpellcheckConfig
from .diagnostics import make_diagnostics, severity_from_name
from .dictionaries import SpellDictionary, build_dictionary_from_config

logger = logging.getLogger(__name__)

SERVER_NAME = "spellcheck-server"


class SpellcheckLanguageServer(LanguageServer):
    """Language server that reports misspelled words as diagnostics."""

    def __init__(self, config: SpellcheckConfig, dictionary: SpellDictionary) -> None:
        super().__init__(
            SERVER_NAME,
            f"v{__version__}",
            text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
        )
        self.config = config
        self.dictionary = dictionary


def publish_spelling_diagnostics(
    ls: Any, uri: str, text: str, version: int | None = None
) -> list[lsp.Diagnostic]:
    """Diagnose ``text`` in full and publish the result for ``uri``."""
    config: SpellcheckConfig = ls.config
    diagnostics = make_diagnostics(
        text,
        ls.dictionary,
        message=config.diagnostic_message,
        severity=severity_from_name(config.severity),
    )
    ls.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics, version=version)
    )
    return diagnostics


def did_open(ls: Any, params: lsp.DidOpenTextDocumentParams) -> None:
    logger.info("received notification with method: %s", lsp.TEXT_DOCUMENT_DID_OPEN)
    document = params.text_document
    publish_spelling_diagnostics(ls, document.uri, document.text, document.version)


def did_change(ls: Any, params: lsp.DidChangeTextDocumentParams) -> None:
    logger.info(
        "received notification with method: %s", lsp.TEXT_DOCUMENT_DID_CHANGE
    )
    if not params.content_changes:
        return
    # Full sync: the last change carries the whole document.
    text = params.content_changes[-1].text
    document = params.text_document
    publish_spelling_diagnostics(ls, document.uri, text, document.version)


def did_close(ls: Any, params: lsp.DidCloseTextDocumentParams) -> None:
    logger.info("received notification with method: %s", lsp.TEXT_DOCUMENT_DID_CLOSE)
    ls.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=params.text_document.uri, diagnostics=[])
    )


def create_server(
    config: SpellcheckConfig, dictionary: SpellDictionary | None = None
) -> SpellcheckLanguageServer:
    """Build a server with its document handlers registered."""
    if dictionary is None:
        dictionary = build_dictionary_from_config(config)
    server = SpellcheckLanguageServer(config, dictionary)
    server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)(did_open)
    server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)(did_change)
    server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)(did_close)
    return server
