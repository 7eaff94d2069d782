"""Builder that turns an open document into its include mapping."""

from pathlib import Path
from typing import Dict, Optional

from pygls import uris

from .parser import scan_includes


def document_path(uri: str) -> Optional[Path]:
    """
    Get the filesystem path of a document.

    Args:
        uri: Document URI as sent by the editor.

    Returns:
        The document's path, or None if the URI does not name a local file.
    """
    if uris.uri_scheme(uri) != "file":
        return None
    fs_path = uris.to_fs_path(uri)
    if not fs_path:
        return None
    return Path(fs_path)


def base_directory(uri: str) -> Optional[Path]:
    """Get the directory include references of a document are relative to."""
    path = document_path(uri)
    if path is None:
        return None
    return path.parent


def build_includes(uri: str, text: str) -> Dict[int, Path]:
    """
    Scan a document and build its include mapping.

    Args:
        uri: Document URI.
        text: Full document text.

    Returns:
        Mapping of line number to candidate path. Documents that are not
        local files have no resolvable includes and map to an empty dict.
    """
    base = base_directory(uri)
    if base is None:
        return {}
    return scan_includes(text, base)


def path_to_uri(path: Path) -> str:
    """Get the URI the editor uses for a local file."""
    return uris.from_fs_path(str(path))
