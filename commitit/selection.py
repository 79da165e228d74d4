"""File selection state for the presentation layer."""

from typing import Iterable, Optional

from commitit.models import FileChangeRecord


class FileSelection:
    """Tracks which changed files the user has picked.

    Records keep their status order; selection is keyed by path.
    """

    def __init__(self, records: Iterable[FileChangeRecord] = (), selected: Optional[Iterable[str]] = None):
        self.records: list[FileChangeRecord] = list(records)
        paths = {r.path for r in self.records}
        self._selected: set[str] = {p for p in (selected or ()) if p in paths}

    def __len__(self) -> int:
        return len(self.records)

    def is_selected(self, path: str) -> bool:
        return path in self._selected

    def toggle(self, path: str) -> bool:
        """Flip the selection of path.

        Returns:
            The new selection state.

        Raises:
            KeyError: If path is not one of the records.
        """
        if not any(r.path == path for r in self.records):
            raise KeyError(path)
        if path in self._selected:
            self._selected.discard(path)
            return False
        self._selected.add(path)
        return True

    def toggle_all(self) -> bool:
        """Select every file, or clear the selection if all are selected.

        Returns:
            True if everything is now selected.
        """
        if self.records and len(self._selected) == len(self.records):
            self._selected.clear()
            return False
        self._selected = {r.path for r in self.records}
        return bool(self.records)

    def clear(self) -> None:
        self._selected.clear()

    def selected_paths(self) -> list[str]:
        """Selected paths in record order."""
        return [r.path for r in self.records if r.path in self._selected]

    def replace(self, records: Iterable[FileChangeRecord]) -> None:
        """Swap in a fresh record list, keeping selections that still exist."""
        self.records = list(records)
        paths = {r.path for r in self.records}
        self._selected &= paths
