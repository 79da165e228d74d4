"""Git status utilities.

Contains:
- get_status: Get git status output in NUL-separated porcelain format
- get_repository_status: Get the modified, untracked and created path lists
"""

from pathlib import Path
from typing import Optional

from commitit.git.runner import DEFAULT_GIT_TIMEOUT, _run_git_command
from commitit.models import RepositoryStatus
from commitit.reconcile import parse_porcelain_status


def get_status(repo_root: Path, timeout: Optional[float] = DEFAULT_GIT_TIMEOUT) -> str:
    """Get git status output in porcelain format.

    Untracked directories are expanded so every file is listed.

    Returns:
        The raw, unstripped status output.
    """
    return _run_git_command(
        ["status", "--porcelain=v1", "-z", "--untracked-files=all"],
        cwd=repo_root,
        timeout=timeout,
        strip=False,
    )


def get_repository_status(
    repo_root: Path, timeout: Optional[float] = DEFAULT_GIT_TIMEOUT
) -> RepositoryStatus:
    """Query git status and split it into the three path lists."""
    return parse_porcelain_status(get_status(repo_root, timeout=timeout))
