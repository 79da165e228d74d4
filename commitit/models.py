"""Data models for commitit.

Contains Pydantic models shared by the engine:
- FileState: Display state of a changed file
- FileChangeRecord: One changed file reported by the status query
- RepositoryStatus: The three path lists a status query yields
- DiffFacts: Structural facts extracted from a unified diff
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FileState(Enum):
    """Display state of a changed file, in precedence order."""

    STAGED = "staged"
    MODIFIED = "modified"
    UNTRACKED = "untracked"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class FileChangeRecord(BaseModel):
    """A changed file as presented to the user for selection."""

    model_config = ConfigDict(frozen=True)

    path: str  # repository-relative, as reported by git
    staged: bool = False
    modified: bool = False

    @property
    def state(self) -> FileState:
        """Resolve the display state: staged > modified > untracked."""
        if self.staged:
            return FileState.STAGED
        if self.modified:
            return FileState.MODIFIED
        return FileState.UNTRACKED


class RepositoryStatus(BaseModel):
    """Paths reported by a status query, split into three lists."""

    model_config = ConfigDict(frozen=True)

    modified: list[str] = Field(default_factory=list)
    not_added: list[str] = Field(default_factory=list)
    created: list[str] = Field(default_factory=list)


class DiffFacts(BaseModel):
    """Files touched and line counts of a unified diff.

    Attributes:
        changed_files: Base names of the touched files in first-seen order.
            Files sharing a base name collapse into a single entry.
        additions: Number of added content lines.
        deletions: Number of removed content lines.
    """

    model_config = ConfigDict(frozen=True)

    changed_files: tuple[str, ...] = ()
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
