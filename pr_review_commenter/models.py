"""
Data models for the PR Review Commenter.

This module contains the dataclasses shared by the GitHub client, the comment
processor and the run orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class CommentSide(Enum):
    """Side of the diff a review comment is anchored to."""
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class DesiredComment:
    """A comment the run intends to post."""
    path: str
    line: int
    text: str
    side: CommentSide = CommentSide.RIGHT

    def __post_init__(self):
        """Validate comment anchoring fields."""
        if not isinstance(self.path, str) or not self.path:
            raise ValueError("Comment path is required")
        # bool is an int subclass, reject it explicitly
        if isinstance(self.line, bool) or not isinstance(self.line, int) or self.line <= 0:
            raise ValueError(f"Comment line must be a positive integer, got {self.line!r}")
        if not isinstance(self.text, str):
            raise ValueError("Comment text must be a string")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DesiredComment':
        """Build a desired comment from an input JSON object.

        Args:
            data: Mapping with ``path``, ``line``, ``text`` and optional ``side``

        Returns:
            The parsed DesiredComment

        Raises:
            ValueError: If the mapping is missing fields or holds invalid values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Comment entry must be an object, got {type(data).__name__}")

        missing = [key for key in ("path", "line", "text") if key not in data]
        if missing:
            raise ValueError(f"Comment entry is missing {', '.join(missing)}")

        side_value = data.get("side") or CommentSide.RIGHT.value
        try:
            side = CommentSide(str(side_value).upper())
        except ValueError:
            raise ValueError(f"Invalid comment side: {side_value!r}")

        return cls(
            path=data["path"],
            line=data["line"],
            text=data["text"],
            side=side,
        )


@dataclass(frozen=True)
class PostedComment:
    """A review comment already present on the pull request."""
    path: str
    line: Optional[int]
    author_login: str
    body: str


@dataclass
class PullRequestTarget:
    """The pull request and commit that comments are attached to."""
    owner: str
    repo: str
    pull_number: int
    commit_sha: str

    @property
    def repo_full_name(self) -> str:
        """Get full repository name."""
        return f"{self.owner}/{self.repo}"


@dataclass
class TriggerContext:
    """The parts of the workflow trigger the run cares about."""
    sha: str = ""
    repository_full_name: Optional[str] = None
    pull_request_number: Optional[int] = None
    pull_request_head_sha: Optional[str] = None
    event_name: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], sha: str = "", event_name: Optional[str] = None) -> 'TriggerContext':
        """Extract the repository and pull request descriptors from an event payload."""
        repository = payload.get("repository") or {}
        pull_request = payload.get("pull_request") or {}
        head = pull_request.get("head") or {}

        return cls(
            sha=sha,
            repository_full_name=repository.get("full_name") or None,
            pull_request_number=pull_request.get("number") or None,
            pull_request_head_sha=head.get("sha") or None,
            event_name=event_name,
        )

    @property
    def has_pull_request(self) -> bool:
        """Whether the trigger itself identifies a pull request."""
        return bool(self.pull_request_number)


@dataclass
class RunResult:
    """Per-comment outcome of one run, in input order."""
    created: List[bool] = field(default_factory=list)

    @classmethod
    def all_false(cls, count: int) -> 'RunResult':
        """Result used when the run ends without submitting anything."""
        return cls(created=[False] * count)

    @property
    def all_created(self) -> bool:
        return all(self.created)

    @property
    def some_created(self) -> bool:
        return any(self.created)


@dataclass(frozen=True)
class OutputBundle:
    """Step outputs derived from a run result."""
    comments_created_all: bool
    comments_created_some: bool
    comments_created_list: List[bool]
