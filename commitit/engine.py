"""Commit message engine.

The single implementation of the workflow both front ends drive:
- load_changes: Query status and reconcile it into FileChangeRecords
- generate_message: Stage the selection, diff it, and produce a message
- commit: Commit staged content with the approved message
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from commitit.composer import compose_message
from commitit.config import MessageSource
from commitit.delegate import DelegateClient
from commitit.diff_parser import parse_diff
from commitit.exceptions import EmptyMessageError, NoSelectionError, NoStagedChangesError
from commitit.git import commit_staged, get_repository_status, get_staged_diff, stage_paths
from commitit.models import DiffFacts, FileChangeRecord
from commitit.reconcile import reconcile_repository_status
from commitit.session import Session

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a message generation."""

    message: str
    source: MessageSource
    diff: str
    facts: Optional[DiffFacts] = None  # only set for locally composed messages


def load_changes(session: Session) -> list[FileChangeRecord]:
    """Return the changed files of the session's working tree."""
    status = get_repository_status(session.repo_root, timeout=session.settings.git_timeout)
    records = reconcile_repository_status(status)
    logger.info("Found %d changed file(s) in %s", len(records), session.repo_root)
    return records


def generate_message(
    session: Session,
    selected_paths: Sequence[str],
    instructions: Optional[str] = None,
    delegate: Optional[DelegateClient] = None,
) -> GenerationResult:
    """Stage the selected files and produce a commit message for the staged diff.

    The message comes from the local composer or from the delegate endpoint,
    depending on session.settings.message_source. Files staged before a
    later failure stay staged.

    Args:
        session: The active session.
        selected_paths: Repository-relative paths chosen by the user.
        instructions: Optional free-text user instructions.
        delegate: Delegate client to use instead of one built from settings.

    Returns:
        GenerationResult with the message and what it was built from.

    Raises:
        NoSelectionError: If no paths are selected.
        NoStagedChangesError: If the staged diff is empty.
        ConfigurationError: If the delegate is the source but has no URL.
        GenerationInProgressError: If the session is already generating.
        GitError: If staging or diffing fails.
        DelegateError: If the delegate endpoint fails.
    """
    if not selected_paths:
        raise NoSelectionError("No files selected.")

    settings = session.settings
    client = None
    if settings.message_source is MessageSource.DELEGATE:
        client = delegate or DelegateClient.from_settings(settings)

    with session.generation():
        stage_paths(session.repo_root, list(selected_paths), timeout=settings.git_timeout)

        diff = get_staged_diff(session.repo_root, timeout=settings.git_timeout)
        if not diff.strip():
            raise NoStagedChangesError("No staged changes found.")

        if client is not None:
            message = client.generate(diff, instructions)
            return GenerationResult(message=message, source=MessageSource.DELEGATE, diff=diff)

        facts = parse_diff(diff)
        message = compose_message(facts, instructions)
        return GenerationResult(
            message=message, source=MessageSource.LOCAL, diff=diff, facts=facts
        )


def commit(session: Session, message: str) -> str:
    """Commit the staged content with message.

    Raises:
        EmptyMessageError: If the message is empty or whitespace.
        GitError: If git rejects the commit.
    """
    if not message or not message.strip():
        raise EmptyMessageError("Commit message cannot be empty.")
    return commit_staged(session.repo_root, message, timeout=session.settings.git_timeout)
