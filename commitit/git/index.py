"""Git index operations.

Contains:
- stage_paths: Add paths to the index
- commit_staged: Commit staged content with a message
"""

import logging
from pathlib import Path
from typing import Optional

from commitit.git.runner import DEFAULT_GIT_TIMEOUT, _run_git_command

logger = logging.getLogger(__name__)


def stage_paths(
    repo_root: Path, paths: list[str], timeout: Optional[float] = DEFAULT_GIT_TIMEOUT
) -> None:
    """Stage the given repository-relative paths.

    Raises:
        GitError: If a path is missing or git rejects the operation.
    """
    if not paths:
        return
    _run_git_command(["add", "--"] + list(paths), cwd=repo_root, timeout=timeout)
    logger.debug("Staged %d path(s)", len(paths))


def commit_staged(
    repo_root: Path, message: str, timeout: Optional[float] = DEFAULT_GIT_TIMEOUT
) -> str:
    """Commit staged content.

    The message is passed to git unmodified.

    Returns:
        The stdout of git commit.
    """
    output = _run_git_command(["commit", "-m", message], cwd=repo_root, timeout=timeout)
    logger.debug("Committed staged changes")
    return output
