"""Thin GitHub REST client.

Creates repositories, lists the authenticated user's repositories and opens
issues. Usable as a command-line tool or imported as a library.

Quick Start:
    ```python
    import ghrepo

    ghrepo.create_repo("demo", "My demo", False, token)
    for repo in ghrepo.list_repos("octocat", token):
        print(repo.name, repo.private)
    ```

CLI Usage:
    ```bash
    ghrepo --createRepo --repoName demo --token $TOKEN
    ghrepo --getrepos --owner octocat --token $TOKEN
    ```
"""

__version__ = "0.1.0"

from .core import (
    create_repo,
    list_repos,
    create_issue,
    pretty_print,
    NewIssue,
    Repository,
    GitHubClientError,
    UsageError,
    ConfigError,
    TransportError,
    RemoteError,
    DecodeError,
    load_settings,
    Settings,
)

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
