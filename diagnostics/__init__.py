"""Diagnostics for include references that point at missing files."""

from .generator import to_diagnostics, missing_file_diagnostic

__all__ = ["to_diagnostics", "missing_file_diagnostic"]
