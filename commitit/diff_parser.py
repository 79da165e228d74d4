"""Unified diff parsing.

Extracts the facts the message composer needs from a unified diff:
which files were touched and how many content lines were added or removed.
"""

import codecs
import logging

from commitit.models import DiffFacts

logger = logging.getLogger(__name__)

NEW_FILE_MARKER = "+++"
OLD_FILE_MARKER = "---"

# "+++ " followed by the path; shorter lines carry no path
_HEADER_PREFIX_WIDTH = len(NEW_FILE_MARKER) + 1

# Sentinel used by diff tooling for the missing side of a creation or deletion
NULL_FILE = "/dev/null"


def _unquote_path(value: str) -> str:
    """Strip git's header decorations from a file header value.

    Git separates an optional timestamp with a tab and wraps paths that
    contain special characters in double quotes, using C-style escapes
    (octal bytes for non-ASCII names).
    """
    value = value.split("\t", 1)[0]
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        raw = codecs.escape_decode(value[1:-1].encode("utf-8"))[0]
        value = raw.decode("utf-8", errors="replace")
    return value


def _base_name(path: str) -> str:
    """Return the final segment of a slash-separated path."""
    return path.split("/")[-1]


def parse_diff(diff: str) -> DiffFacts:
    """Parse a unified diff into DiffFacts.

    Lines starting with "+++" name the new side of a file; the base name
    of that path is recorded unless it is the /dev/null sentinel. Other
    lines starting with "+" or "-" (excluding "+++" and "---" headers)
    are counted as additions and deletions. Everything else is ignored.

    Files in different directories that share a base name are recorded
    once.

    Args:
        diff: Unified diff text.

    Returns:
        DiffFacts with changed base names in first-seen order.
    """
    changed_files: dict[str, None] = {}
    additions = 0
    deletions = 0

    for line in diff.split("\n"):
        if line.startswith(NEW_FILE_MARKER):
            if len(line) > _HEADER_PREFIX_WIDTH:
                path = _unquote_path(line[_HEADER_PREFIX_WIDTH:])
                if path != NULL_FILE:
                    changed_files.setdefault(_base_name(path), None)
        elif line.startswith("+"):
            additions += 1
        elif line.startswith("-") and not line.startswith(OLD_FILE_MARKER):
            deletions += 1

    facts = DiffFacts(
        changed_files=tuple(changed_files),
        additions=additions,
        deletions=deletions,
    )
    logger.debug(
        "Parsed diff: %d file(s), +%d -%d",
        len(facts.changed_files), facts.additions, facts.deletions,
    )
    return facts
