"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command in a working directory and return its output
- get_repo_root: Get the root directory of the repository containing a directory
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from commitit.exceptions import GitError, NotARepositoryError

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT = 60.0

GIT_MISSING_MESSAGE = "Git is not installed or not in PATH."


def _run_git_command(
    args: list[str],
    cwd: Optional[Path] = None,
    timeout: Optional[float] = DEFAULT_GIT_TIMEOUT,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in. Defaults to the process directory.
        timeout: Seconds before the command is abandoned.
        strip: Strip surrounding whitespace from stdout. Disable for
            formats where leading spaces are significant.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails, times out, or git is missing.
    """
    logger.debug("Running git %s in %s", " ".join(args), cwd or ".")
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except subprocess.TimeoutExpired:
        raise GitError(f"Git command timed out after {timeout}s: git {' '.join(args)}")
    except FileNotFoundError:
        raise GitError(GIT_MISSING_MESSAGE)
    return result.stdout.strip() if strip else result.stdout


def get_repo_root(cwd: Optional[Path] = None, timeout: Optional[float] = DEFAULT_GIT_TIMEOUT) -> Path:
    """Get the root directory of the git repository containing cwd.

    Args:
        cwd: Directory to check. Defaults to the process directory.
        timeout: Seconds before the command is abandoned.

    Returns:
        Path to the repository root.

    Raises:
        NotARepositoryError: If cwd is not inside a git work tree.
        GitError: If git itself cannot be run.
    """
    if cwd is not None and not Path(cwd).is_dir():
        raise NotARepositoryError(f"Directory does not exist: {cwd}")
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd, timeout=timeout)
    except GitError as e:
        if str(e) == GIT_MISSING_MESSAGE:
            raise
        raise NotARepositoryError(
            f"Not a git repository: {cwd or Path.cwd()}"
        )
    return Path(root)
