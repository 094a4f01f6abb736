"""
Shared utility functions for the PR Review Commenter.

This module provides the comment identity helpers used for deduplication and
small parsing helpers shared across modules.
"""

import re
from typing import Optional, Tuple


# Unicode-aware: also covers \v, \f, \x1c-\x1f, \x85, \u2028 and \u2029
_WHITESPACE_RE = re.compile(r'\s+')

COMMENT_KEY_DELIMITER = ":"


def normalize_comment_text(text: str) -> str:
    """Strip every whitespace and line separator character from comment text.

    Re-wrapped or re-indented text keeps the same normalized form, while
    different wording still normalizes differently.

    Args:
        text: The comment text to normalize

    Returns:
        The text with all whitespace removed, other characters in original order
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub("", text)


def comment_key(path: str, line: Optional[int], author_login: str, text: str) -> str:
    """Compute the identity string of a review comment.

    The fields are joined with ``:`` in a fixed order. A delimiter inside the
    path or text could make two distinct comments collide; that approximation
    is accepted.

    Args:
        path: File path the comment is anchored to
        line: Line number the comment is anchored to
        author_login: Login of the comment author
        text: Raw comment text

    Returns:
        The comment identity
    """
    return COMMENT_KEY_DELIMITER.join(
        (path, str(line), author_login, normalize_comment_text(text))
    )


def split_repo_full_name(full_name: str) -> Tuple[str, str]:
    """Split an ``owner/repo`` name into its parts.

    Raises:
        ValueError: If the name is not of the form ``owner/repo``
    """
    if not full_name or "/" not in full_name:
        raise ValueError(f"Invalid repository name: {full_name}")
    owner, repo = full_name.split("/", 1)
    if not owner or not repo:
        raise ValueError(f"Invalid repository name: {full_name}")
    return owner, repo
