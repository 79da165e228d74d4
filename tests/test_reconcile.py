"""Tests for commitit.reconcile module."""

from commitit.models import FileState, RepositoryStatus
from commitit.reconcile import (
    parse_porcelain_status,
    reconcile_repository_status,
    reconcile_status,
)


class TestReconcileStatus:
    """Tests for reconcile_status function."""

    def test_length_is_sum_of_inputs(self):
        """Test that disjoint inputs produce one record per path."""
        records = reconcile_status(["a.py", "b.py"], ["c.txt"], ["d.md", "e.md"])
        assert len(records) == 5

    def test_every_record_is_modified_not_staged(self):
        """Test the flags on every record."""
        records = reconcile_status(["a.py"], ["b.py"], ["c.py"])
        assert all(r.staged is False and r.modified is True for r in records)
        assert all(r.state is FileState.MODIFIED for r in records)

    def test_preserves_concatenation_order(self):
        """Test modified, then untracked, then created order."""
        records = reconcile_status(["m2", "m1"], ["u1"], ["c1"])
        assert [r.path for r in records] == ["m2", "m1", "u1", "c1"]

    def test_deduplicates_keeping_first_occurrence(self):
        """Test that an overlapping path keeps its first position."""
        records = reconcile_status(["x.py", "y.py"], ["z.py"], ["x.py"])
        assert [r.path for r in records] == ["x.py", "y.py", "z.py"]

    def test_empty_inputs(self):
        """Test that empty inputs yield an empty list."""
        assert reconcile_status([], [], []) == []

    def test_paths_are_not_normalized(self):
        """Test that paths are passed through unchanged."""
        records = reconcile_status(["./dir//file name.py"], [], [])
        assert records[0].path == "./dir//file name.py"

    def test_from_repository_status(self):
        """Test reconciling a RepositoryStatus model."""
        status = RepositoryStatus(modified=["a"], not_added=["b"], created=["c"])
        records = reconcile_repository_status(status)
        assert [r.path for r in records] == ["a", "b", "c"]


class TestParsePorcelainStatus:
    """Tests for parse_porcelain_status function."""

    def test_splits_into_lists(self, sample_porcelain_status):
        """Test the mapping of status codes to lists."""
        status = parse_porcelain_status(sample_porcelain_status)
        assert status.modified == ["src/app.py", "README.md"]
        assert status.not_added == ["notes.txt"]
        assert status.created == ["docs/new.md"]

    def test_rename_original_path_is_skipped(self, sample_porcelain_status):
        """Test that the original path of a rename is not read as an entry."""
        status = parse_porcelain_status(sample_porcelain_status)
        all_paths = status.modified + status.not_added + status.created
        assert "original.py" not in all_paths
        assert "renamed.py" not in all_paths

    def test_renamed_and_modified_is_listed(self):
        """Test that a renamed file with worktree edits is modified."""
        status = parse_porcelain_status("RM new.py\0old.py\0")
        assert status.modified == ["new.py"]

    def test_added_then_modified_is_in_two_lists(self):
        """Test that "AM" lands in created and modified."""
        status = parse_porcelain_status("AM both.py\0")
        assert status.created == ["both.py"]
        assert status.modified == ["both.py"]

    def test_overlap_is_deduplicated_by_reconciler(self):
        """Test that "AM" yields a single record after reconciliation."""
        status = parse_porcelain_status("AM both.py\0")
        records = reconcile_repository_status(status)
        assert [r.path for r in records] == ["both.py"]

    def test_deleted_files_not_listed(self):
        """Test that deletions are excluded."""
        status = parse_porcelain_status("D  gone.py\0 D also_gone.py\0")
        assert status.modified == []
        assert status.created == []

    def test_paths_with_spaces(self):
        """Test that NUL separation keeps spaces in paths."""
        status = parse_porcelain_status("?? my notes.txt\0")
        assert status.not_added == ["my notes.txt"]

    def test_empty_output(self):
        """Test a clean working tree."""
        status = parse_porcelain_status("")
        assert status == RepositoryStatus()

    def test_unmerged_entries_not_listed(self):
        """Test that conflicted entries are never offered for selection."""
        status = parse_porcelain_status(
            "AA both_added.py\0AU added_by_us.py\0UU both_modified.py\0"
            "DU deleted_by_us.py\0UD deleted_by_them.py\0DD both_deleted.py\0"
        )
        assert status == RepositoryStatus()

    def test_intent_to_add_is_created(self):
        """Test that a `git add -N` entry is listed as created."""
        status = parse_porcelain_status(" A later.py\0")
        assert status.created == ["later.py"]
        assert status.modified == []
