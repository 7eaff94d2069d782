"""Diagnostics generator for missing include targets."""

from pathlib import Path
from typing import Dict, List

from lsprotocol import types as lsp


# Column the zero-width marker is placed at; editors clamp it to line end
DIAGNOSTIC_COLUMN = 200
DIAGNOSTIC_SOURCE = "grlx-lsp"


def missing_file_diagnostic(path: Path, line: int) -> lsp.Diagnostic:
    """
    Build the diagnostic reported for an include whose file is missing.

    Args:
        path: Candidate path of the include.
        line: 0-based line number of the include.

    Returns:
        An error diagnostic naming the missing file.
    """
    position = lsp.Position(line=line, character=DIAGNOSTIC_COLUMN)
    return lsp.Diagnostic(
        range=lsp.Range(start=position, end=position),
        message=f"File {path.name} does not exist",
        severity=lsp.DiagnosticSeverity.Error,
        source=DIAGNOSTIC_SOURCE,
    )


def to_diagnostics(includes: Dict[int, Path]) -> List[lsp.Diagnostic]:
    """
    Check every include of a document against the filesystem.

    Args:
        includes: Mapping of line number to candidate path.

    Returns:
        One diagnostic per include whose candidate path does not exist,
        ordered by line.
    """
    diagnostics: List[lsp.Diagnostic] = []

    for line in sorted(includes):
        path = includes[line]
        if path.exists():
            continue
        diagnostics.append(missing_file_diagnostic(path, line))

    return diagnostics
