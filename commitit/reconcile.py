"""Status reconciliation.

Contains:
- reconcile_status: Merge the status path lists into FileChangeRecords
- parse_porcelain_status: Split porcelain status output into path lists
"""

import logging
from typing import Iterable

from commitit.models import FileChangeRecord, RepositoryStatus

logger = logging.getLogger(__name__)

# Both-added and both-deleted conflicts; other conflicts carry a "U"
_UNMERGED_PAIRS = {("A", "A"), ("D", "D")}


def reconcile_status(
    modified: Iterable[str],
    untracked: Iterable[str],
    created: Iterable[str],
) -> list[FileChangeRecord]:
    """Merge modified, untracked and created paths into one list of records.

    Every record is reported as modified and not staged. Order is the
    concatenation of the three inputs; a path appearing more than once keeps
    its first position.

    Args:
        modified: Paths with content changes.
        untracked: Paths present on disk but unknown to git.
        created: Paths newly added to the index.

    Returns:
        List of FileChangeRecord, one per distinct path.
    """
    records = []
    seen = set()

    for source in (modified, untracked, created):
        for path in source:
            if path in seen:
                continue
            seen.add(path)
            records.append(FileChangeRecord(path=path, staged=False, modified=True))

    return records


def reconcile_repository_status(status: RepositoryStatus) -> list[FileChangeRecord]:
    """Reconcile a RepositoryStatus into FileChangeRecords."""
    return reconcile_status(status.modified, status.not_added, status.created)


def parse_porcelain_status(output: str) -> RepositoryStatus:
    """Parse `git status --porcelain=v1 -z` output into three path lists.

    Mapping of the two status columns (index, worktree):
    - "??": untracked
    - unmerged entries ("AA", "DD", or "U" in either column): not listed
    - "A" in either column: created, and also modified when the worktree
      column is "M"; a worktree "A" is an intent-to-add entry
    - "M" in either column: modified
    - renames and copies are listed as modified only when the worktree
      column is "M"; deletions are not listed

    Args:
        output: Raw NUL-separated porcelain output.

    Returns:
        RepositoryStatus with modified, not_added and created paths.
    """
    modified: list[str] = []
    not_added: list[str] = []
    created: list[str] = []

    entries = output.split("\0")
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if len(entry) < 4:
            continue

        index_col, worktree_col, path = entry[0], entry[1], entry[3:]

        if index_col in ("R", "C"):
            # The original path follows as its own field
            i += 1

        if index_col == "?" and worktree_col == "?":
            not_added.append(path)
            continue
        if index_col == "!":
            continue
        if (index_col, worktree_col) in _UNMERGED_PAIRS or "U" in (index_col, worktree_col):
            continue

        if index_col == "A" or worktree_col == "A":
            created.append(path)
            if worktree_col == "M":
                modified.append(path)
            continue

        if index_col == "M" or worktree_col == "M":
            modified.append(path)

    logger.debug(
        "Parsed status: %d modified, %d untracked, %d created",
        len(modified), len(not_added), len(created),
    )
    return RepositoryStatus(modified=modified, not_added=not_added, created=created)
