"""
GitHub Actions entry point for the PR Review Commenter.
"""

import logging
import sys

from .config import Config, LoggingConfig
from .commenter import ReviewCommenter
from .env_reader import get_env_str
from .github_client import GitHubClient
from .outputs import build_outputs, write_outputs


logger = logging.getLogger(__name__)


def configure_logging(logging_config: LoggingConfig) -> None:
    """Send log records to stderr with the configured level and format."""
    logging.basicConfig(
        level=getattr(logging, logging_config.level.value),
        format=logging_config.format,
        stream=sys.stderr,
        force=True
    )


def _escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_failed(message: str) -> None:
    """Mark the step as failed with an error annotation."""
    print(f"::error::{_escape_command_data(message)}", flush=True)


def main() -> int:
    """Run the action once and return the process exit code."""
    configure_logging(LoggingConfig())

    try:
        config = Config.from_environment()
    except ValueError as e:
        logger.error(f"Invalid configuration: {str(e)}")
        set_failed(str(e))
        return 1

    configure_logging(config.logging)
    logger.debug(f"Configuration: {config.to_dict()}")

    try:
        with GitHubClient(config.github) as github_client:
            trigger = github_client.load_trigger_context(
                get_env_str("GITHUB_EVENT_PATH"),
                sha=get_env_str("GITHUB_SHA"),
                event_name=get_env_str("GITHUB_EVENT_NAME") or None
            )
            with ReviewCommenter(config, github_client) as commenter:
                result = commenter.run(trigger)
        write_outputs(build_outputs(result))
    except Exception as e:
        logger.error(f"Error while posting review comments: {str(e)}")
        set_failed(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
