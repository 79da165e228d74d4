"""Exception classes for commitit.

Contains the error taxonomy shared by the engine and both front ends:
- CommitItError: Base exception for every user-facing failure
- ConfigurationError: No target directory or invalid settings
- NotARepositoryError: Target directory is not under version control
- NoSelectionError: Generation requested with zero files selected
- NoStagedChangesError: Diff requested but nothing is staged
- EmptyMessageError: Commit requested with an empty message
- GenerationInProgressError: A generation is already running for the session
- CollaboratorError: Failure surfaced by git or the delegate endpoint
- GitError: A git command failed
- DelegateError: The delegate endpoint failed or rejected the request
"""


class CommitItError(Exception):
    """Base exception for commitit errors."""

    pass


class ConfigurationError(CommitItError):
    """Raised when no target directory is resolvable or settings are invalid."""

    pass


class NotARepositoryError(CommitItError):
    """Raised when the target directory is not inside a git work tree."""

    pass


class NoSelectionError(CommitItError):
    """Raised when message generation is requested with no files selected."""

    pass


class NoStagedChangesError(CommitItError):
    """Raised when there are no staged changes."""

    pass


class EmptyMessageError(CommitItError):
    """Raised when a commit is requested with an empty message."""

    pass


class GenerationInProgressError(CommitItError):
    """Raised when a generation is started while another one is outstanding."""

    pass


class CollaboratorError(CommitItError):
    """Base exception for failures of git or the delegate endpoint."""

    pass


class GitError(CollaboratorError):
    """Custom exception for git-related errors."""

    pass


class DelegateError(CollaboratorError):
    """Raised when the delegate endpoint cannot produce a message."""

    pass
