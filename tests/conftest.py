"""
Pytest configuration and fixtures for pr_review_commenter tests.
"""

import pytest
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pr_review_commenter.models import DesiredComment, PostedComment


@pytest.fixture
def pull_request_event():
    """Provide a pull_request event payload."""
    return {
        "action": "synchronize",
        "number": 42,
        "repository": {"full_name": "owner/repo"},
        "pull_request": {
            "number": 42,
            "head": {"sha": "abc123"},
            "base": {"sha": "fff000"},
        },
    }


@pytest.fixture
def push_event():
    """Provide a push event payload (no pull request descriptor)."""
    return {
        "ref": "refs/heads/feature",
        "after": "def456",
        "repository": {"full_name": "owner/repo"},
    }


@pytest.fixture
def two_comments():
    """Provide two distinct desired comments."""
    return [
        DesiredComment(path="a.go", line=5, text="first comment"),
        DesiredComment(path="b.go", line=10, text="second comment"),
    ]


@pytest.fixture
def posted_by_bot_and_human():
    """Provide the same comment posted by the bot and by a human."""
    return [
        PostedComment(path="a.go", line=5, author_login="bot", body="x"),
        PostedComment(path="a.go", line=5, author_login="human", body="x"),
    ]


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch):
    """Reset environment variables for each test."""
    # Clear potentially interfering environment variables
    for key in list(os.environ.keys()):
        if key.startswith(("GITHUB_", "INPUT_", "RUNNER_")) or key == "LOG_LEVEL":
            monkeypatch.delenv(key, raising=False)
