"""Include service owning the document index.

All reads and writes of the index go through one ``IncludeService``. The
language server holds a single instance and calls it from its handlers, which
pygls runs one message at a time on its event loop thread.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from lsprotocol import types as lsp

from diagnostics.generator import to_diagnostics
from index.model import DocumentIndex
from scanner.builder import build_includes, path_to_uri
from scanner.resolver import Resolution, Resolved, resolve_definition


logger = logging.getLogger(__name__)

Publisher = Callable[[str, List[lsp.Diagnostic]], None]


class IncludeService:
    """
    Tracks the includes of open documents and answers queries about them.

    Args:
        publish: Called with a document URI and its diagnostics whenever
            there is something to report for that document.
    """

    def __init__(self, publish: Publisher):
        self._index = DocumentIndex()
        self._publish = publish

    @property
    def index(self) -> DocumentIndex:
        return self._index

    def update_document(self, uri: str, text: str) -> Dict[int, Path]:
        """
        Rescan a document after it was opened or changed.

        The document's previous mapping is replaced, then missing includes
        are reported.

        Returns:
            The new include mapping.
        """
        includes = build_includes(uri, text)
        self._index.replace(uri, includes)
        logger.debug("Indexed %d includes for %s", len(includes), uri)

        self.publish_diagnostics(uri)
        return includes

    def close_document(self, uri: str) -> None:
        """Forget a closed document."""
        if self._index.remove(uri):
            logger.debug("Dropped %s from the index", uri)

    def publish_diagnostics(self, uri: str) -> List[lsp.Diagnostic]:
        """
        Report the includes of a document that point at missing files.

        Nothing is published when every include exists, so diagnostics from
        an earlier version of the document stay visible in the editor.
        """
        includes = self._index.get(uri)
        if includes is None:
            return []

        diagnostics = to_diagnostics(includes)
        logger.debug("%d missing includes in %s", len(diagnostics), uri)
        if diagnostics:
            self._publish(uri, diagnostics)
        return diagnostics

    def resolve(self, uri: str, line: int) -> Optional[Resolution]:
        """
        Resolve the include on a line of a document.

        Returns:
            None if the document is not indexed, otherwise the resolution.
        """
        includes = self._index.get(uri)
        if includes is None:
            logger.debug("Definition requested for unknown document %s", uri)
            return None
        return resolve_definition(includes, line)

    def definition(self, uri: str, line: int) -> Optional[lsp.Location]:
        """
        Get the location an include navigates to.

        Returns:
            The start of the referenced file, or None when the line has no
            include or its target cannot be found.
        """
        resolution = self.resolve(uri, line)
        if not isinstance(resolution, Resolved):
            return None

        start = lsp.Position(line=0, character=0)
        return lsp.Location(
            uri=path_to_uri(resolution.path),
            range=lsp.Range(start=start, end=start),
        )
