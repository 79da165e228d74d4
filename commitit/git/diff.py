"""Git diff utilities.

Contains:
- get_staged_diff: Get the unified diff of staged content
"""

from pathlib import Path
from typing import Optional

from commitit.git.runner import DEFAULT_GIT_TIMEOUT, _run_git_command


def get_staged_diff(repo_root: Path, timeout: Optional[float] = DEFAULT_GIT_TIMEOUT) -> str:
    """Get the staged diff.

    Args:
        repo_root: The root directory of the git repository.
        timeout: Seconds before the command is abandoned.

    Returns:
        The unified diff text exactly as git printed it, empty when
        nothing is staged.
    """
    return _run_git_command(
        ["diff", "--staged", "--no-color", "--no-ext-diff"],
        cwd=repo_root,
        timeout=timeout,
        strip=False,
    )
