"""
Comprehensive tests for pr_review_commenter/main.py
"""

import json
import logging
import pytest
from unittest.mock import Mock, patch

from pr_review_commenter import main as main_module
from pr_review_commenter.main import configure_logging as real_configure_logging
from pr_review_commenter.config import LoggingConfig, LogLevel
from pr_review_commenter.github_client import GitHubClientError
from pr_review_commenter.models import TriggerContext


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep main() from replacing the root logging handlers."""
    with patch("pr_review_commenter.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_client_class():
    """Patch GitHubClient as used by main()."""
    with patch("pr_review_commenter.main.GitHubClient") as client_class:
        client = client_class.return_value
        client.__enter__ = Mock(return_value=client)
        client.__exit__ = Mock(return_value=False)
        client.list_review_comments.return_value = []
        client.find_pull_requests_for_commit.return_value = []
        yield client_class


@pytest.fixture
def mock_client(mock_client_class):
    """The GitHubClient instance main() builds."""
    return mock_client_class.return_value


@pytest.fixture
def action_env(monkeypatch, tmp_path, pull_request_event):
    """Set up a pull_request run with two comments; returns the output file."""
    event_file = tmp_path / "event.json"
    event_file.write_text(json.dumps(pull_request_event))
    output_file = tmp_path / "output"
    output_file.write_text("")

    monkeypatch.setenv("GITHUB_TOKEN", "ghs_test123456789012")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_file))
    monkeypatch.setenv("GITHUB_SHA", "merge999")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("INPUT_COMMENTS", json.dumps([
        {"path": "a.go", "line": 5, "text": "first"},
        {"path": "b.go", "line": 6, "text": "second", "side": "LEFT"},
    ]))
    return output_file


def _read_outputs(output_file):
    return dict(line.split("=", 1) for line in output_file.read_text().splitlines())


class TestMain:
    """Tests for the main entry point."""

    def test_missing_token_fails_without_api_calls(self, mock_client_class, capsys):
        """Test a missing credential fails before any GitHub call."""
        assert main_module.main() == 1

        mock_client_class.assert_not_called()
        client = mock_client_class.return_value
        assert client.list_review_comments.call_count == 0
        assert client.create_review_comment.call_count == 0
        assert client.find_pull_requests_for_commit.call_count == 0
        assert "::error::no github token provided" in capsys.readouterr().out

    def test_missing_token_sets_no_outputs(self, monkeypatch, tmp_path):
        """Test no outputs are written on configuration failure."""
        output_file = tmp_path / "output"
        output_file.write_text("")
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        assert main_module.main() == 1
        assert output_file.read_text() == ""

    def test_invalid_comments_fail(self, monkeypatch, mock_client_class, capsys):
        """Test malformed comments input fails before any GitHub call."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghs_test123456789012")
        monkeypatch.setenv("INPUT_COMMENTS", "[{")

        assert main_module.main() == 1
        mock_client_class.assert_not_called()
        assert "::error::comments input is not valid JSON" in capsys.readouterr().out

    def test_pull_request_run_end_to_end(self, action_env):
        """Test a pull_request run through the real client with PyGithub mocked."""
        with patch("pr_review_commenter.github_client.Github") as mock_github:
            repo = mock_github.return_value.get_repo.return_value
            pr = repo.get_pull.return_value
            pr.get_review_comments.return_value = []
            commit = repo.get_commit.return_value

            assert main_module.main() == 0

        mock_github.return_value.get_repo.assert_called_once_with("owner/repo")
        repo.get_pull.assert_called_once_with(42)
        repo.get_commit.assert_called_once_with("abc123")
        assert pr.create_review_comment.call_count == 2
        second = pr.create_review_comment.call_args_list[1].kwargs
        assert second == {"body": "second", "commit": commit, "path": "b.go", "line": 6, "side": "LEFT"}
        assert _read_outputs(action_env) == {
            "comments-created-all": "true",
            "comments-created-some": "true",
            "comments-created-list": "[true,true]",
        }

    def test_trigger_read_from_environment(self, mock_client, action_env):
        """Test the event path, SHA and event name come from the environment."""
        mock_client.load_trigger_context.return_value = TriggerContext(sha="merge999")

        assert main_module.main() == 0

        args, kwargs = mock_client.load_trigger_context.call_args
        assert args[0].endswith("event.json")
        assert kwargs == {"sha": "merge999", "event_name": "pull_request"}

    def test_no_repository_publishes_all_false(self, mock_client, action_env):
        """Test a trigger without repository succeeds with all-false outputs."""
        mock_client.load_trigger_context.return_value = TriggerContext(sha="merge999")

        assert main_module.main() == 0

        mock_client.create_review_comment.assert_not_called()
        assert _read_outputs(action_env) == {
            "comments-created-all": "false",
            "comments-created-some": "false",
            "comments-created-list": "[false,false]",
        }

    def test_api_failure_fails_run_without_outputs(self, mock_client, action_env, capsys):
        """Test an upstream failure marks the step failed and writes no outputs."""
        mock_client.load_trigger_context.return_value = TriggerContext(
            sha="merge999", repository_full_name="owner/repo",
            pull_request_number=42, pull_request_head_sha="abc123"
        )
        mock_client.create_review_comment.side_effect = GitHubClientError("Failed to create review comment: 422")

        assert main_module.main() == 1

        assert mock_client.create_review_comment.call_count == 1
        assert action_env.read_text() == ""
        assert "::error::Failed to create review comment: 422" in capsys.readouterr().out

    def test_configures_logging_from_config(self, no_logging_setup, mock_client, action_env, monkeypatch):
        """Test logging is reconfigured with the loaded level."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        mock_client.load_trigger_context.return_value = TriggerContext()

        main_module.main()

        assert no_logging_setup.call_args.args[0].level == LogLevel.DEBUG


class TestSetFailed:
    """Tests for set_failed function."""

    def test_escapes_newlines(self, capsys):
        """Test multi-line messages stay on one command line."""
        main_module.set_failed("line one\nline two 100%")
        assert capsys.readouterr().out == "::error::line one%0Aline two 100%25\n"


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_sets_root_level(self):
        """Test the configured level is applied to the root logger."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            real_configure_logging(LoggingConfig(level=LogLevel.WARNING))
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
