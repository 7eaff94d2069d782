"""Document index storing the include mapping of every open document."""

from pathlib import Path
from typing import Dict, Optional


class DocumentIndex:
    """
    Table of open documents and their include references.

    Each document URI maps to a dict of 0-based line number to candidate
    path. A document's mapping is only ever replaced as a whole, so it always
    reflects the latest full text seen for that document.
    """

    def __init__(self):
        self._documents: Dict[str, Dict[int, Path]] = {}

    def replace(self, uri: str, includes: Dict[int, Path]) -> None:
        """
        Store the include mapping of a document.

        Any mapping previously stored for the document is discarded.
        """
        self._documents[uri] = dict(includes)

    def get(self, uri: str) -> Optional[Dict[int, Path]]:
        """Get a copy of a document's mapping, or None if it is not indexed."""
        includes = self._documents.get(uri)
        if includes is None:
            return None
        return dict(includes)

    def remove(self, uri: str) -> bool:
        """
        Drop a document from the index.

        Returns:
            True if the document was indexed.
        """
        return self._documents.pop(uri, None) is not None

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, uri: str) -> bool:
        return uri in self._documents
