"""Scanner module for include extraction and reference resolution."""

from .parser import scan_includes, parse_include_line, parse_module_name
from .resolver import (
    NoReference,
    Resolution,
    Resolved,
    Unresolvable,
    resolve_definition,
)
from .builder import build_includes

__all__ = [
    "scan_includes",
    "parse_include_line",
    "parse_module_name",
    "NoReference",
    "Resolution",
    "Resolved",
    "Unresolvable",
    "resolve_definition",
    "build_includes",
]
