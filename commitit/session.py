"""Session state shared by the engine operations of one front end.

A Session binds a working directory to its repository and the resolved
settings. Front ends create one explicitly and pass it to every engine call.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from commitit.config import Settings, load_config
from commitit.exceptions import ConfigurationError, GenerationInProgressError
from commitit.git import get_repo_root

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """A working directory bound to its git repository."""

    working_dir: Path
    repo_root: Path
    settings: Settings
    _generating: bool = field(default=False, repr=False)

    @property
    def is_generating(self) -> bool:
        return self._generating

    @contextmanager
    def generation(self) -> Iterator[None]:
        """Mark a message generation as in flight for the duration of the block.

        Raises:
            GenerationInProgressError: If another generation is outstanding.
        """
        if self._generating:
            raise GenerationInProgressError("A commit message is already being generated.")
        self._generating = True
        try:
            yield
        finally:
            self._generating = False


def resolve_target_dir(
    override: Optional[Path] = None,
    workspace: Optional[Path] = None,
) -> Path:
    """Pick the directory to operate on.

    Args:
        override: Directory given explicitly by the user.
        workspace: Directory provided by the surrounding context.

    Returns:
        The override if given, otherwise the workspace.

    Raises:
        ConfigurationError: If neither is available.
    """
    target = override or workspace
    if not target:
        raise ConfigurationError("No directory selected.")
    return Path(target).expanduser()


def open_session(target_dir: Path, settings: Optional[Settings] = None) -> Session:
    """Open a session on the repository containing target_dir.

    Raises:
        NotARepositoryError: If target_dir is not under version control.
        ConfigurationError: If settings cannot be loaded.
    """
    if settings is None:
        settings = load_config()
    repo_root = get_repo_root(target_dir, timeout=settings.git_timeout)
    logger.debug("Opened session on %s (repo root %s)", target_dir, repo_root)
    return Session(working_dir=Path(target_dir), repo_root=repo_root, settings=settings)
