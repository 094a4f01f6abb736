"""
Comment processor for the PR Review Commenter.

This module decides which desired comments need to be posted by comparing
their identities against the comments the bot already posted on the pull
request.

Each desired comment is judged against the same snapshot of posted comments
taken at the start of the run. Two identical desired comments in one run are
therefore both posted when neither is in the snapshot; only comments from
earlier runs are deduplicated.
"""

import logging
from typing import Iterable, Set

from .models import DesiredComment, PostedComment
from .config import CommentConfig
from .utils import comment_key

logger = logging.getLogger(__name__)


def build_existing_index(posted_comments: Iterable[PostedComment], bot_login: str) -> Set[str]:
    """Build the set of identities of comments posted by the bot.

    Comments by any other author are ignored, so two authors may post the
    same text on the same line without colliding.

    Args:
        posted_comments: Review comments currently on the pull request
        bot_login: Login whose comments count for deduplication (exact match)

    Returns:
        Set of comment identities
    """
    return {
        comment_key(c.path, c.line, c.author_login, c.body)
        for c in posted_comments
        if c.author_login == bot_login
    }


def should_create_comment(
    desired: DesiredComment,
    existing_index: Set[str],
    bot_login: str,
    allow_repeats: bool
) -> bool:
    """Decide whether a desired comment should be posted.

    The identity is computed with the bot login, since desired comments carry
    no author of their own.
    """
    key = comment_key(desired.path, desired.line, bot_login, desired.text)
    return allow_repeats or key not in existing_index


class CommentProcessor:
    """Applies the run's deduplication settings to desired comments."""

    def __init__(self, comment_config: CommentConfig):
        """Initialize comment processor with configuration.

        Args:
            comment_config: Comment configuration (bot login and repeat policy)
        """
        self.comment_config = comment_config

    def build_index(self, posted_comments: Iterable[PostedComment]) -> Set[str]:
        """Index the bot's existing comments for this run."""
        index = build_existing_index(posted_comments, self.comment_config.bot_login)
        logger.info(f"Found {len(index)} existing comment(s) by {self.comment_config.bot_login}")
        return index

    def should_create(self, desired: DesiredComment, existing_index: Set[str]) -> bool:
        """Decide whether to post a desired comment against the run's index."""
        create = should_create_comment(
            desired,
            existing_index,
            self.comment_config.bot_login,
            self.comment_config.allow_repeats
        )
        if not create:
            logger.info(f"skip commenting on {desired.path}:{desired.line} since comment already exists")
        return create
