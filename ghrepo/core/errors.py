"""Errors raised by the GitHub API operations.

Operations never print or exit; they raise one of these and let the caller
decide what to show and which exit code to use.
"""
from __future__ import annotations
from typing import List, Optional, Sequence


class GitHubClientError(Exception):
    """Base class for every error ghrepo reports to the user.

    Attributes:
        status_code: HTTP status of the response that caused the error, or
            None when no response was involved.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UsageError(GitHubClientError):
    """A required field was empty or invalid. Raised before any request is sent.

    Args:
        missing: Names of the empty fields.
        message: Explicit message, used instead of the "You must specify ..."
            text built from `missing`.
    """

    def __init__(self, missing: Sequence[str] = (), message: Optional[str] = None) -> None:
        super().__init__(message or f"You must specify {_join(list(missing))}")
        self.missing = list(missing)


class ConfigError(UsageError):
    """The config file could not be read or holds a value of the wrong type."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message)


class TransportError(GitHubClientError):
    """The request never produced a response (DNS, connect, timeout, ...)."""


class RemoteError(GitHubClientError):
    """GitHub answered with an unexpected status code."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Response code is {status_code}", status_code=status_code)
        self.body = body


class DecodeError(GitHubClientError):
    """The status was fine but the body was not the JSON we expected."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


def _join(names: List[str]) -> str:
    """Join field names the way a sentence would: 'a', 'a and b', 'a, b and c'."""
    if len(names) <= 1:
        return "".join(names)
    return ", ".join(names[:-1]) + " and " + names[-1]
