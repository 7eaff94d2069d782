"""Tests for the document index."""

import pytest
from pathlib import Path

from index.model import DocumentIndex


URI = "file:///srv/states/site.grlx"


class TestDocumentIndex:
    """Tests for DocumentIndex class."""

    def test_empty_index(self):
        """Test empty index initialization."""
        index = DocumentIndex()
        assert len(index) == 0
        assert index.get(URI) is None

    def test_replace(self):
        """Test storing a document's includes."""
        index = DocumentIndex()
        includes = {1: Path("/srv/states/apache.grlx")}

        index.replace(URI, includes)

        assert len(index) == 1
        assert URI in index
        assert index.get(URI) == includes

    def test_replace_discards_old_entries(self):
        """Test a new mapping is not merged with the previous one."""
        index = DocumentIndex()
        index.replace(URI, {1: Path("/srv/a.grlx"), 2: Path("/srv/b.grlx")})

        index.replace(URI, {3: Path("/srv/c.grlx")})

        assert index.get(URI) == {3: Path("/srv/c.grlx")}
        assert 1 not in index.get(URI)

    def test_replace_with_empty_mapping(self):
        """Test a document without includes stays indexed."""
        index = DocumentIndex()

        index.replace(URI, {})

        assert URI in index
        assert index.get(URI) == {}

    def test_stored_mapping_is_copied(self):
        """Test callers cannot mutate the stored mapping."""
        index = DocumentIndex()
        includes = {1: Path("/srv/a.grlx")}
        index.replace(URI, includes)

        includes[2] = Path("/srv/b.grlx")
        index.get(URI)[3] = Path("/srv/c.grlx")

        assert index.get(URI) == {1: Path("/srv/a.grlx")}

    def test_remove(self):
        """Test dropping a document."""
        index = DocumentIndex()
        index.replace(URI, {1: Path("/srv/a.grlx")})

        assert index.remove(URI)
        assert URI not in index
        assert not index.remove(URI)

