"""
Main run orchestrator for the PR Review Commenter.

This module contains the ReviewCommenter class that resolves the target pull
request, indexes the bot's existing comments and posts the desired comments
that are not already there.
"""

import logging
from typing import Optional

from .config import Config
from .models import PullRequestTarget, RunResult, TriggerContext
from .github_client import GitHubClient
from .comment_processor import CommentProcessor
from .utils import split_repo_full_name


logger = logging.getLogger(__name__)


class ReviewCommenterError(Exception):
    """Base exception for review commenter errors."""
    pass


class ReviewCommenter:
    """Main orchestrator class for one commenting run."""

    def __init__(self, config: Config, github_client: Optional[GitHubClient] = None):
        """Initialize the commenter with configuration.

        Args:
            config: Run configuration
            github_client: Client to use instead of one built from ``config.github``
        """
        self.config = config
        self._owns_client = github_client is None
        self.github_client = github_client or GitHubClient(config.github)
        self.comment_processor = CommentProcessor(config.comments)

        logger.info("Initialized ReviewCommenter")

    def run(self, trigger: TriggerContext) -> RunResult:
        """Post the configured comments on the pull request the trigger points at.

        Ends early with an all-false result when there is no repository or no
        pull request to comment on. GitHub API failures propagate and stop the
        run; comments already created stay.
        """
        desired_comments = self.config.comments.comments
        logger.info(f"=== Posting {len(desired_comments)} review comment(s) ===")

        target = self.resolve_target(trigger)
        if target is None:
            return RunResult.all_false(len(desired_comments))

        logger.info(f"Commenting on PR #{target.pull_number} in {target.repo_full_name} at {target.commit_sha[:7]}")

        posted = self.github_client.list_review_comments(target.owner, target.repo, target.pull_number)
        existing_index = self.comment_processor.build_index(posted)

        result = RunResult()
        for comment in desired_comments:
            create = self.comment_processor.should_create(comment, existing_index)
            if create:
                self.github_client.create_review_comment(
                    target.owner,
                    target.repo,
                    target.pull_number,
                    target.commit_sha,
                    comment.path,
                    comment.line,
                    comment.side,
                    comment.text
                )
            result.created.append(create)

        logger.info(f"Created {sum(result.created)} of {len(result.created)} comment(s)")
        return result

    def resolve_target(self, trigger: TriggerContext) -> Optional[PullRequestTarget]:
        """Resolve the pull request and commit to comment on.

        A pull request in the trigger payload wins; otherwise the first pull
        request associated with the trigger commit is used, in the order the
        API returns them.

        Returns:
            The target, or None when there is nothing to comment on
        """
        if not trigger.repository_full_name:
            logger.info("unable to determine repository from request type")
            return None

        try:
            owner, repo = split_repo_full_name(trigger.repository_full_name)
        except ValueError as e:
            raise ReviewCommenterError(str(e))

        if trigger.has_pull_request:
            pull_number = trigger.pull_request_number
            commit_sha = trigger.pull_request_head_sha or trigger.sha
        else:
            pull_numbers = self.github_client.find_pull_requests_for_commit(owner, repo, trigger.sha)
            pull_number = pull_numbers[0] if pull_numbers else None
            commit_sha = trigger.sha
            if len(pull_numbers) > 1:
                logger.info(f"Commit is associated with PRs {pull_numbers}; using #{pull_number}")

        if not pull_number:
            logger.info("this action only works on pull_request events or other commits associated with a pull")
            return None

        if not commit_sha:
            logger.warning(f"unable to determine the commit to comment on for PR #{pull_number}")
            return None

        return PullRequestTarget(
            owner=owner,
            repo=repo,
            pull_number=pull_number,
            commit_sha=commit_sha
        )

    def close(self):
        """Clean up resources."""
        if self._owns_client:
            self.github_client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
