"""
PR Review Commenter Package

A GitHub Action that posts line-anchored review comments on a pull request
and skips comments the bot has already posted.
"""

__version__ = "1.0.0"
__description__ = "Post pull request review comments without repeating them"

# Submodules import PyGithub; exports are loaded on first access so that
# `import pr_review_commenter` stays cheap.

__all__ = [
    # Main classes
    'Config', 'ConfigurationError', 'ReviewCommenter', 'ReviewCommenterError',
    # Data models
    'CommentSide', 'DesiredComment', 'PostedComment', 'PullRequestTarget',
    'TriggerContext', 'RunResult', 'OutputBundle',
    # Clients and processing
    'GitHubClient', 'GitHubClientError', 'CommentProcessor', 'build_outputs',
]

# Lazy import map: attribute -> (module_path, attr_name)
_lazy_exports = {
    # Main classes
    'Config': ('pr_review_commenter.config', 'Config'),
    'ConfigurationError': ('pr_review_commenter.config', 'ConfigurationError'),
    'ReviewCommenter': ('pr_review_commenter.commenter', 'ReviewCommenter'),
    'ReviewCommenterError': ('pr_review_commenter.commenter', 'ReviewCommenterError'),
    # Models
    'CommentSide': ('pr_review_commenter.models', 'CommentSide'),
    'DesiredComment': ('pr_review_commenter.models', 'DesiredComment'),
    'PostedComment': ('pr_review_commenter.models', 'PostedComment'),
    'PullRequestTarget': ('pr_review_commenter.models', 'PullRequestTarget'),
    'TriggerContext': ('pr_review_commenter.models', 'TriggerContext'),
    'RunResult': ('pr_review_commenter.models', 'RunResult'),
    'OutputBundle': ('pr_review_commenter.models', 'OutputBundle'),
    # Clients and processing
    'GitHubClient': ('pr_review_commenter.github_client', 'GitHubClient'),
    'GitHubClientError': ('pr_review_commenter.github_client', 'GitHubClientError'),
    'CommentProcessor': ('pr_review_commenter.comment_processor', 'CommentProcessor'),
    'build_outputs': ('pr_review_commenter.outputs', 'build_outputs'),
}


def __getattr__(name):
    target = _lazy_exports.get(name)
    if not target:
        raise AttributeError(f"module 'pr_review_commenter' has no attribute '{name}'")
    module_path, attr_name = target
    try:
        module = __import__(module_path, fromlist=[attr_name])
        value = getattr(module, attr_name)
        globals()[name] = value  # cache for future access
        return value
    except ImportError as e:
        raise ImportError(f"Failed to import '{name}' from '{module_path}': {e}")
