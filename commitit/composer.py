"""Commit message composition from parsed diff facts."""

from typing import Optional

from commitit.models import DiffFacts

DEFAULT_PREFIX = "Update: "

# Number of file names listed for multi-file changes
MAX_LISTED_FILES = 3


def build_prefix(instructions: Optional[str] = None) -> str:
    """Build the message prefix from optional user instructions.

    Args:
        instructions: Free-text user instructions. None, empty and
            whitespace-only strings are equivalent.

    Returns:
        "<instructions>: " or the default "Update: ".
    """
    if instructions and instructions.strip():
        return f"{instructions.strip()}: "
    return DEFAULT_PREFIX


def compose_message(facts: DiffFacts, instructions: Optional[str] = None) -> str:
    """Compose a one-line commit message from diff facts.

    Args:
        facts: Parsed diff facts.
        instructions: Optional user instructions used as the prefix.

    Returns:
        The commit message.

    Example output:
        Update: Changes in repository
        Update: Changes in a.ts (+2 -0)
        fix: Changes in multiple files (a.ts, b.ts, c.ts...) (+5 -1)
    """
    prefix = build_prefix(instructions)
    files = facts.changed_files
    counts = f"(+{facts.additions} -{facts.deletions})"

    if not files:
        return f"{prefix}Changes in repository"

    if len(files) == 1:
        return f"{prefix}Changes in {files[0]} {counts}"

    listed = ", ".join(files[:MAX_LISTED_FILES])
    ellipsis = "..." if len(files) > MAX_LISTED_FILES else ""
    return f"{prefix}Changes in multiple files ({listed}{ellipsis}) {counts}"
