"""Scanner for extracting include references from grlx documents."""

import re
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple


# Marker lines delimiting the include section
INCLUDE_MARKER = "include:"
STEPS_MARKER = "steps:"

# Extension appended to every module name
EXTENSION = ".grlx"

# Two spaces, a dash, whitespace, then the reference text
_INCLUDE_LINE_RE = re.compile(r"^ {2}-[ \t\r\n]+(.*)$")

# Leading dot followed by a module name in the current directory
_CURRENT_DIR_RE = re.compile(r"^\.([A-Za-z0-9]+)")

# Line breaks counted by editors
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def iter_include_section(text: str) -> Iterator[Tuple[int, str]]:
    """
    Iterate over the lines of the include section of a document.

    The section starts after the first line beginning with ``include:`` and
    ends before the first following line beginning with ``steps:`` (or at
    the end of the document).

    Args:
        text: Full document text.

    Yields:
        (line_number, line) tuples with 0-based line numbers.
    """
    in_section = False
    for line_number, line in enumerate(_LINE_BREAK_RE.split(text)):
        if not in_section:
            if line.startswith(INCLUDE_MARKER):
                in_section = True
            continue
        if line.startswith(STEPS_MARKER):
            return
        yield line_number, line


def parse_include_line(line: str) -> Optional[str]:
    """
    Parse a single line of the include section.

    Args:
        line: The line to parse.

    Returns:
        The reference text following the dash, or None if the line does not
        follow the ``  - <reference>`` form.
    """
    match = _INCLUDE_LINE_RE.match(line)
    if match is None:
        return None
    return match.group(1)


def parse_module_name(reference: str) -> str:
    """
    Get the module name a reference points at.

    ``.apache`` names the ``apache`` module next to the current document;
    anything else (``../apache``, ``web/apache``, a lone ``.``) is used
    unchanged.
    """
    match = _CURRENT_DIR_RE.match(reference)
    if match is not None:
        return match.group(1)
    return reference


def candidate_path(base_dir: Path, module_name: str) -> Path:
    """Join a module name onto the directory of the including document."""
    return base_dir / f"{module_name}{EXTENSION}"


def scan_includes(text: str, base_dir: Path) -> Dict[int, Path]:
    """
    Extract the include references of a document.

    Args:
        text: Full document text.
        base_dir: Directory containing the document.

    Returns:
        Mapping of 0-based line number to the candidate path of the
        referenced module. Paths are not checked for existence.
    """
    includes: Dict[int, Path] = {}

    for line_number, line in iter_include_section(text):
        reference = parse_include_line(line)
        if reference is None:
            continue
        includes[line_number] = candidate_path(base_dir, parse_module_name(reference))

    return includes
