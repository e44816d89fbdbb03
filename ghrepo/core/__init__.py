"""Core functionality for ghrepo.

This module contains:
- GitHub API operations
- Request/response models
- Error types
- Configuration management
"""

from .github import create_repo, list_repos, create_issue, pretty_print
from .models import NewIssue, Repository
from .errors import GitHubClientError, UsageError, ConfigError, TransportError, RemoteError, DecodeError
from .config import load_settings, Settings

__all__ = [
    "create_repo",
    "list_repos",
    "create_issue",
    "pretty_print",
    "NewIssue",
    "Repository",
    "GitHubClientError",
    "UsageError",
    "ConfigError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "load_settings",
    "Settings",
]
