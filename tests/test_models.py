"""Tests for commitit.models module."""

import pytest
from pydantic import ValidationError

from commitit.models import DiffFacts, FileChangeRecord, FileState


class TestFileChangeRecord:
    """Tests for FileChangeRecord model."""

    def test_staged_wins(self):
        """Test that staged takes precedence over modified."""
        record = FileChangeRecord(path="a", staged=True, modified=True)
        assert record.state is FileState.STAGED

    def test_modified(self):
        """Test the modified state."""
        assert FileChangeRecord(path="a", modified=True).state is FileState.MODIFIED

    def test_untracked_default(self):
        """Test that no flags means untracked."""
        assert FileChangeRecord(path="a").state is FileState.UNTRACKED

    def test_labels(self):
        """Test display labels."""
        assert FileState.STAGED.label == "Staged"
        assert FileState.UNTRACKED.label == "Untracked"

    def test_immutable(self):
        """Test that records cannot be mutated."""
        record = FileChangeRecord(path="a")
        with pytest.raises(ValidationError):
            record.staged = True


class TestDiffFacts:
    """Tests for DiffFacts model."""

    def test_defaults(self):
        """Test empty facts."""
        facts = DiffFacts()
        assert facts.changed_files == ()
        assert facts.additions == 0
        assert facts.deletions == 0

    def test_negative_counts_rejected(self):
        """Test that counts must be non-negative."""
        with pytest.raises(ValidationError):
            DiffFacts(additions=-1)
