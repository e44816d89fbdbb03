"""GitHub REST API operations used by the CLI.

Each function performs exactly one synchronous request against the API and
either returns a value or raises a :mod:`ghrepo.core.errors` exception. There
is no pagination, retry or caching.

Every request carries the token as a bearer credential and asks for GitHub's
JSON media type. The status code is always checked before the body is decoded.

Example:
    ```python
    from ghrepo.core.github import create_repo, list_repos

    create_repo("demo", "", False, token)
    repos = list_repos("octocat", token)
    ```
"""
from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
import json
import logging
import re
from urllib.parse import quote
import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import DecodeError, RemoteError, TransportError, UsageError
from .models import NewIssue, Repository

GH_API = "https://api.github.com"

logger = logging.getLogger(__name__)

_repo_list = TypeAdapter(List[Repository])

# Account and repository names GitHub accepts.
_NAME_RE = re.compile(r"[A-Za-z0-9._-]+")


def _headers(token: str) -> Dict[str, str]:
    """Construct HTTP headers for an authenticated GitHub API request."""
    return {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "Authorization": f"Bearer {token}",
    }


def require(**fields: str) -> None:
    """Raise :class:`UsageError` naming every empty field.

    Keyword order is kept in the message, so
    ``require(repo_name="", token="")`` reports "repo name and token".
    """
    missing = [k.replace("_", " ") for k, v in fields.items() if not v]
    if missing:
        raise UsageError(missing)


def _segment(field: str, value: str) -> str:
    """Return `value` escaped for use as one URL path segment.

    Raises:
        UsageError: If `value` is not a valid GitHub account or repository name.
    """
    if value in (".", "..") or not _NAME_RE.fullmatch(value):
        raise UsageError(message=f"Invalid {field}: {value!r}")
    return quote(value, safe="")


@contextmanager
def _session(client: Optional[httpx.Client]) -> Iterator[httpx.Client]:
    if client is not None:
        yield client
        return
    with httpx.Client() as c:
        yield c


def _send(client: httpx.Client, method: str, url: str, token: str,
          payload: Optional[Dict[str, Any]] = None) -> httpx.Response:
    logger.debug("%s %s", method, url)
    try:
        resp = client.request(method, url, json=payload, headers=_headers(token))
    except httpx.InvalidURL as e:
        raise UsageError(message=f"Invalid URL {url!r}: {e}") from e
    except httpx.HTTPError as e:
        logger.warning("%s %s failed: %s", method, url, e)
        raise TransportError(f"{method} {url} failed: {e}") from e
    logger.debug("%s %s -> %d", method, url, resp.status_code)
    return resp


def _expect(resp: httpx.Response, status: int) -> None:
    if resp.status_code != status:
        logger.warning("Unexpected response code %d (wanted %d)", resp.status_code, status)
        raise RemoteError(resp.status_code, resp.text)


def create_repo(name: str, description: str, private: bool, token: str, *,
                api_url: str = GH_API, client: Optional[httpx.Client] = None) -> None:
    """Create a repository for the authenticated user.

    Args:
        name: Repository name. Must not be empty.
        description: Repository description (may be empty).
        private: Whether the new repository is private.
        token: GitHub token. Must not be empty.
        api_url: API base URL.
        client: Optional open ``httpx.Client`` to send the request with.

    Raises:
        UsageError: If ``name`` or ``token`` is empty. Nothing is sent.
        TransportError: If the request could not be completed.
        RemoteError: If GitHub does not answer 201 Created. The error carries
            the response body, which usually explains the rejection.
    """
    require(repo_name=name, token=token)
    repo = Repository(name=name, description=description or "", private=private)
    with _session(client) as c:
        resp = _send(c, "POST", f"{api_url}/user/repos", token, repo.to_payload())
    _expect(resp, 201)


def list_repos(owner: str, token: str, *, api_url: str = GH_API,
               client: Optional[httpx.Client] = None) -> List[Repository]:
    """List repositories of the user the token belongs to.

    ``owner`` is required but the endpoint is always ``/user/repos``: the
    listing follows the token's identity, not the owner name.

    Returns:
        Repositories in the order GitHub sent them.

    Raises:
        UsageError: If ``owner`` or ``token`` is empty. Nothing is sent.
        TransportError: If the request could not be completed.
        RemoteError: If GitHub does not answer 200 OK.
        DecodeError: If the body is not a JSON array of repositories.
    """
    require(owner=owner, token=token)
    logger.debug("Listing repos for authenticated user (owner=%s)", owner)
    with _session(client) as c:
        resp = _send(c, "GET", f"{api_url}/user/repos", token)
    _expect(resp, 200)

    try:
        data = resp.json()
    except ValueError as e:
        raise DecodeError(f"Malformed JSON in response: {e}", resp.status_code, resp.text) from e
    try:
        return _repo_list.validate_python(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected repository list payload: {e}", resp.status_code, resp.text) from e


def create_issue(owner: str, repo: str, title: str, token: str, body: str = "", *,
                 api_url: str = GH_API, client: Optional[httpx.Client] = None) -> None:
    """Open an issue on ``owner/repo``.

    Raises:
        UsageError: If owner, repo, title or token is empty, or owner or repo
            is not a valid GitHub name. Nothing is sent.
        TransportError: If the request could not be completed.
        RemoteError: If GitHub does not answer 201 Created.
    """
    require(owner=owner, repo_name=repo, title=title, token=token)
    path = f"repos/{_segment('owner', owner)}/{_segment('repo name', repo)}/issues"
    url = f"{api_url}/{path}"
    issue = NewIssue(title=title, body=body or "")
    with _session(client) as c:
        resp = _send(c, "POST", url, token, issue.to_payload())
    _expect(resp, 201)


def pretty_print(obj: Any) -> str:
    """Render models (or lists of them) as indented JSON for the terminal."""
    if isinstance(obj, (list, tuple)):
        obj = [o.model_dump() if isinstance(o, BaseModel) else o for o in obj]
    elif isinstance(obj, BaseModel):
        obj = obj.model_dump()
    return json.dumps(obj, ensure_ascii=False, indent=2)
