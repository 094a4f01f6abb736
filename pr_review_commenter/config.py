"""
Configuration management for the PR Review Commenter.

This module handles all configuration aspects including action inputs,
environment variables, validation, and default settings.
"""

import json
from dataclasses import dataclass, field
from typing import List, Dict, Any
from enum import Enum

from .models import DesiredComment
from .validators import (
    validate_required_string, validate_positive_int, validate_api_base_url,
    validate_list_of
)
from .env_reader import get_env_str, get_env_int, get_env_bool, get_env_enum, get_input, get_input_bool


DEFAULT_BOT_LOGIN = "github-actions[bot]"


class ConfigurationError(ValueError):
    """Raised when the run cannot be configured from its inputs."""
    pass


class LogLevel(Enum):
    """Available log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class GitHubConfig:
    """Configuration for GitHub integration."""
    token: str
    api_base_url: str = "https://api.github.com"
    timeout: int = 30

    def __post_init__(self):
        """Validate GitHub configuration."""
        validate_required_string(self.token, "GitHub token")
        validate_api_base_url(self.api_base_url)
        validate_positive_int(self.timeout, "timeout")
        self.api_base_url = self.api_base_url.rstrip("/")


@dataclass
class CommentConfig:
    """Configuration for which comments to post and how to deduplicate them."""
    bot_login: str = DEFAULT_BOT_LOGIN
    allow_repeats: bool = False
    comments: List[DesiredComment] = field(default_factory=list)

    def __post_init__(self):
        """Validate comment configuration."""
        validate_required_string(self.bot_login, "Bot login")
        validate_list_of(self.comments, DesiredComment, "comments")


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: LogLevel = LogLevel.INFO
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_comments(raw: str) -> List[DesiredComment]:
    """Parse the ``comments`` input into desired comments.

    Args:
        raw: JSON array of ``{path, line, text, side?}`` objects; empty means ``[]``

    Returns:
        Desired comments in input order

    Raises:
        ConfigurationError: If the JSON is malformed or an entry is invalid
    """
    try:
        data = json.loads(raw or "[]")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"comments input is not valid JSON: {e}")

    if not isinstance(data, list):
        raise ConfigurationError("comments input must be a JSON array")

    comments = []
    for index, entry in enumerate(data):
        try:
            comments.append(DesiredComment.from_dict(entry))
        except ValueError as e:
            raise ConfigurationError(f"Invalid comment at index {index}: {e}")
    return comments


@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""
    github: GitHubConfig
    comments: CommentConfig = field(default_factory=CommentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from action inputs and environment variables."""
        github_token = get_input("repo-token", "", "GITHUB_TOKEN")
        if not github_token:
            raise ConfigurationError(
                "no github token provided, set one with the repo-token input or GITHUB_TOKEN env variable"
            )

        github_config = GitHubConfig(
            token=github_token,
            api_base_url=get_env_str("GITHUB_API_URL", "https://api.github.com"),
            timeout=get_env_int("GITHUB_TIMEOUT", 30)
        )

        comment_config = CommentConfig(
            bot_login=get_input("repo-token-user-login", DEFAULT_BOT_LOGIN),
            allow_repeats=get_input_bool("allow-repeats"),
            comments=parse_comments(get_input("comments", "[]"))
        )

        # Actions sets RUNNER_DEBUG=1 when step debug logging is enabled
        default_level = LogLevel.DEBUG if get_env_bool("RUNNER_DEBUG", False) else LogLevel.INFO
        logging_config = LoggingConfig(
            level=get_env_enum("LOG_LEVEL", LogLevel, default_level)
        )

        return cls(
            github=github_config,
            comments=comment_config,
            logging=logging_config
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary, leaving out the token."""
        return {
            "github": {
                "api_base_url": self.github.api_base_url,
                "timeout": self.github.timeout,
            },
            "comments": {
                "bot_login": self.comments.bot_login,
                "allow_repeats": self.comments.allow_repeats,
                "count": len(self.comments.comments),
            },
            "logging": {
                "level": self.logging.level.value,
            }
        }
