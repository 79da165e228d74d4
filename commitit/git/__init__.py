"""Git collaborators for commitit.

This package wraps the git command line:
- runner: _run_git_command, get_repo_root
- status: get_status, get_repository_status
- diff: get_staged_diff
- index: stage_paths, commit_staged
"""

from commitit.exceptions import GitError, NotARepositoryError

from commitit.git.runner import (
    DEFAULT_GIT_TIMEOUT,
    _run_git_command,
    get_repo_root,
)

from commitit.git.status import (
    get_status,
    get_repository_status,
)

from commitit.git.diff import get_staged_diff

from commitit.git.index import (
    stage_paths,
    commit_staged,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    # Runner
    "DEFAULT_GIT_TIMEOUT",
    "_run_git_command",
    "get_repo_root",
    # Status
    "get_status",
    "get_repository_status",
    # Diff
    "get_staged_diff",
    # Index
    "stage_paths",
    "commit_staged",
]
