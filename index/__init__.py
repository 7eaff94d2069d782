"""Index of open documents and their include references."""

from .model import DocumentIndex

__all__ = ["DocumentIndex"]
