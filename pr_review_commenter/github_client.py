"""
GitHub API client for the PR Review Commenter.

This module handles all GitHub API interactions: reading the workflow trigger,
listing and creating pull request review comments, and finding the pull
requests associated with a commit.

Calls are made once; failures are raised as GitHubClientError and nothing is
retried.
"""

import json
import logging
import os
from typing import Dict, List, Optional

import requests
from github import Auth, Github, GithubException

from .config import GitHubConfig
from .models import CommentSide, PostedComment, TriggerContext


logger = logging.getLogger(__name__)


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""
    pass


class PRNotFoundError(GitHubClientError):
    """Exception raised when PR is not found."""
    pass


class GitHubClient:
    """GitHub API client for review comments."""

    def __init__(self, config: GitHubConfig):
        """Initialize GitHub client with configuration."""
        self.config = config
        self._client = Github(
            auth=Auth.Token(config.token),
            base_url=config.api_base_url,
            timeout=config.timeout,
            retry=None
        )
        self._repos: Dict[str, object] = {}
        self._pulls: Dict[str, object] = {}
        self._commits: Dict[str, object] = {}

        logger.info("Initialized GitHub client")

    def load_trigger_context(self, event_path: str, sha: str = "", event_name: Optional[str] = None) -> TriggerContext:
        """Read the GitHub Actions event payload into a trigger context.

        A missing event file gives an empty payload, which has no repository
        and so leads to a no-op run.
        """
        if not event_path or not os.path.isfile(event_path):
            logger.warning(f"No GitHub event payload found at {event_path!r}")
            return TriggerContext(sha=sha, event_name=event_name)

        try:
            with open(event_path, "r", encoding="utf-8") as f:
                event_data = json.load(f)
            logger.info("Successfully loaded GitHub event data")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load GitHub event data: {str(e)}")
            raise GitHubClientError(f"Failed to load event data: {str(e)}")

        if not isinstance(event_data, dict):
            raise GitHubClientError("Failed to load event data: payload is not an object")

        return TriggerContext.from_payload(event_data, sha=sha, event_name=event_name)

    def _get_repo(self, owner: str, repo: str):
        """Get repository, cached for the lifetime of the client."""
        full_name = f"{owner}/{repo}"
        if full_name not in self._repos:
            logger.debug(f"Fetching repository: {full_name}")
            self._repos[full_name] = self._client.get_repo(full_name)
        return self._repos[full_name]

    def _get_pull(self, owner: str, repo: str, pull_number: int):
        """Get pull request, cached for the lifetime of the client."""
        key = f"{owner}/{repo}#{pull_number}"
        if key not in self._pulls:
            logger.debug(f"Fetching PR {key}")
            repo_obj = self._get_repo(owner, repo)
            try:
                self._pulls[key] = repo_obj.get_pull(pull_number)
            except GithubException as e:
                if e.status == 404:
                    raise PRNotFoundError(f"PR #{pull_number} not found in {owner}/{repo}")
                raise
        return self._pulls[key]

    def _get_commit(self, owner: str, repo: str, commit_sha: str):
        """Get commit, cached for the lifetime of the client."""
        key = f"{owner}/{repo}@{commit_sha}"
        if key not in self._commits:
            self._commits[key] = self._get_repo(owner, repo).get_commit(commit_sha)
        return self._commits[key]

    def list_review_comments(self, owner: str, repo: str, pull_number: int) -> List[PostedComment]:
        """List every review comment on a pull request, across all pages."""
        logger.debug(f"Listing review comments for {owner}/{repo}#{pull_number}")
        try:
            pr = self._get_pull(owner, repo, pull_number)
            posted = [
                PostedComment(
                    path=c.path,
                    line=c.line,
                    author_login=getattr(c.user, 'login', '') or '',
                    body=c.body or ''
                )
                for c in pr.get_review_comments()
            ]
        except GitHubClientError:
            raise
        except (GithubException, requests.exceptions.RequestException) as e:
            logger.error(f"Failed to list review comments: {str(e)}")
            raise GitHubClientError(f"Failed to list review comments: {str(e)}")

        logger.info(f"Loaded {len(posted)} review comment(s) on PR #{pull_number}")
        return posted

    def create_review_comment(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        commit_id: str,
        path: str,
        line: int,
        side: CommentSide,
        body: str
    ) -> str:
        """Create a single line comment on a pull request.

        Returns:
            URL of the created comment
        """
        logger.debug(f"Creating review comment on {path}:{line} ({side.value}) for PR #{pull_number}")
        try:
            pr = self._get_pull(owner, repo, pull_number)
            commit = self._get_commit(owner, repo, commit_id)
            created = pr.create_review_comment(
                body=body,
                commit=commit,
                path=path,
                line=line,
                side=side.value
            )
        except GitHubClientError:
            raise
        except (GithubException, requests.exceptions.RequestException) as e:
            logger.error(f"Failed to create review comment on {path}:{line}: {str(e)}")
            raise GitHubClientError(f"Failed to create review comment: {str(e)}")

        url = getattr(created, 'html_url', None) or getattr(created, 'url', '') or ''
        logger.debug(f"created {url}")
        return url

    def find_pull_requests_for_commit(self, owner: str, repo: str, commit_sha: str) -> List[int]:
        """Find the numbers of the pull requests associated with a commit.

        The order is whatever the API returns.
        """
        if not commit_sha:
            return []

        logger.debug(f"Looking up pull requests for commit {commit_sha[:7]}")
        try:
            commit = self._get_commit(owner, repo, commit_sha)
            numbers = [pr.number for pr in commit.get_pulls()]
        except (GithubException, requests.exceptions.RequestException) as e:
            logger.error(f"Failed to find pull requests for commit {commit_sha[:7]}: {str(e)}")
            raise GitHubClientError(f"Failed to find pull requests for commit: {str(e)}")

        logger.info(f"Commit {commit_sha[:7]} is associated with {len(numbers)} pull request(s)")
        return numbers

    def close(self):
        """Clean up resources."""
        self._client.close()
        logger.debug("GitHub client closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
