"""Resolution of include references to the files they define."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union


logger = logging.getLogger(__name__)

# File standing in for a module that is a directory
ENTRY_FILE = "init.grlx"


@dataclass(frozen=True)
class Resolved:
    """The reference points at an existing file."""

    path: Path


@dataclass(frozen=True)
class NoReference:
    """There is no include reference on the requested line."""

    line: int


@dataclass(frozen=True)
class Unresolvable:
    """Neither the candidate file nor its package directory exists."""

    candidate: Path


Resolution = Union[Resolved, NoReference, Unresolvable]


def directory_candidate(candidate: Path) -> Path:
    """
    Get the package directory a candidate path may stand for.

    ``web/apache.grlx`` may name the ``web/apache`` directory rather than a
    single file.
    """
    return candidate.parent / candidate.stem


def resolve_candidate_path(candidate: Path) -> Resolution:
    """
    Resolve a candidate path to the file defining the referenced module.

    Tries, in order:
    1. The candidate path itself (file or directory).
    2. The directory named after the candidate's stem.

    A directory resolves to its ``init.grlx`` entry file.

    Args:
        candidate: Candidate path produced by the scanner.

    Returns:
        Resolved with the canonical path of the target file, or Unresolvable.

    Raises:
        OSError: If the target file cannot be canonicalized, e.g. a package
            directory without an entry file or a permission failure.
    """
    if candidate.exists():
        target = candidate
    else:
        fallback = directory_candidate(candidate)
        if not fallback.exists():
            return Unresolvable(candidate)
        target = fallback

    if target.is_dir():
        target = target / ENTRY_FILE

    return Resolved(target.resolve(strict=True))


def resolve_definition(includes: Dict[int, Path], line: int) -> Resolution:
    """
    Resolve the include reference on a line of a document.

    Args:
        includes: The document's mapping of line number to candidate path.
        line: 0-based line number under the cursor.

    Returns:
        NoReference if the line holds no include, otherwise the outcome of
        resolving its candidate path.
    """
    candidate: Optional[Path] = includes.get(line)
    if candidate is None:
        return NoReference(line)

    resolution = resolve_candidate_path(candidate)
    logger.debug("Resolved line %d (%s) to %s", line, candidate, resolution)
    return resolution
