"""grlx language server.

Registers the document synchronisation and go-to-definition handlers and
routes them to the include service.
"""

import logging
from typing import List, Optional

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from . import __version__
from .config import apply_log_level
from .service import IncludeService


logger = logging.getLogger(__name__)


class GrlxLanguageServer(LanguageServer):
    """Language server tracking the includes of open grlx documents."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.includes = IncludeService(publish=self._publish_include_diagnostics)

    def _publish_include_diagnostics(self, uri: str, diagnostics: List[lsp.Diagnostic]) -> None:
        self.text_document_publish_diagnostics(
            lsp.PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
        )


def create_server() -> GrlxLanguageServer:
    """Create a server with all handlers registered."""
    ls = GrlxLanguageServer(
        "grlx-lsp",
        __version__,
        text_document_sync_kind=lsp.TextDocumentSyncKind.Full,
    )

    ls.feature(lsp.INITIALIZE)(on_initialize)
    ls.feature(lsp.TEXT_DOCUMENT_DID_OPEN)(did_open)
    ls.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)(did_change)
    ls.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)(did_close)
    ls.feature(lsp.TEXT_DOCUMENT_DEFINITION)(definition)

    return ls


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def on_initialize(ls: GrlxLanguageServer, params: lsp.InitializeParams) -> None:
    """Honor an explicit log level in ``initializationOptions``."""
    opts = params.initialization_options
    if isinstance(opts, dict):
        apply_log_level(opts.get("logLevel"))


# ---------------------------------------------------------------------------
# Text document synchronisation
# ---------------------------------------------------------------------------

def did_open(ls: GrlxLanguageServer, params: lsp.DidOpenTextDocumentParams) -> None:
    td = params.text_document
    ls.includes.update_document(td.uri, td.text)


def did_change(ls: GrlxLanguageServer, params: lsp.DidChangeTextDocumentParams) -> None:
    # Full sync: the first change carries the whole document
    if not params.content_changes:
        return
    ls.includes.update_document(params.text_document.uri, params.content_changes[0].text)


def did_close(ls: GrlxLanguageServer, params: lsp.DidCloseTextDocumentParams) -> None:
    ls.includes.close_document(params.text_document.uri)


# ---------------------------------------------------------------------------
# Go-to-definition
# ---------------------------------------------------------------------------

def definition(ls: GrlxLanguageServer, params: lsp.DefinitionParams) -> Optional[lsp.Location]:
    """Navigate from an include line to the start of the file it names."""
    uri = params.text_document.uri
    location = ls.includes.definition(uri, params.position.line)
    if location is None:
        logger.debug("No definition for %s:%d", uri, params.position.line)
    return location
