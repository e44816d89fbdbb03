"""Command-line interface for ghrepo.

Parses flags into a `CommandOptions` value, runs the requested GitHub
operations and prints their results. The operations themselves never print
or exit; every error comes back here as an exception and is turned into a
message and an exit code.

Usage:
    ```bash
    # Create a private repository
    ghrepo --createRepo --repoName demo --description "A demo" --isPrivate --token $TOKEN

    # List the authenticated user's repositories
    ghrepo --getrepos --owner octocat --token $TOKEN

    # Open an issue
    ghrepo --createIssue --owner octocat --repoName demo --title "Bug" --body "Details"
    ```

Exit codes:
    0: success, including a run with no action flag
    1: transport failure, unexpected status, or undecodable response
    2: bad arguments, a missing or invalid value, or an unusable config file
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import argparse
import sys
from ..core.config import load_settings
from ..core.errors import GitHubClientError, RemoteError, UsageError
from ..core.github import create_issue, create_repo, list_repos, require, pretty_print
from ..logger import init_logger, get_logger

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


@dataclass
class CommandOptions:
    """Everything one run needs, resolved from flags, environment and config."""

    token: str = ""
    owner: str = ""
    repo_name: str = ""
    title: str = ""
    body: str = ""
    description: str = ""
    is_private: bool = False
    create_repo: bool = False
    get_repos: bool = False
    create_issue: bool = False
    api_url: str = ""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Flag names are camelCase (`--repoName`, `--createRepo`, ...) to stay
    compatible with existing scripts.

    Returns:
        Parser whose namespace feeds `resolve_options`.
    """
    p = argparse.ArgumentParser(prog="ghrepo", description="Create and list GitHub repositories, and open issues.")

    p.add_argument("--token", default=None, help="GitHub auth token (default: $GITHUB_TOKEN)")
    p.add_argument("--owner", default=None, help="The repo owner (default: $GITHUB_OWNER)")
    p.add_argument("--repoName", dest="repo_name", default="", help="GitHub repo name")
    p.add_argument("--title", default="", help="Title for new issue")
    p.add_argument("--body", default="", help="Body for new issue")
    p.add_argument("--description", default="", help="Description for the repo")
    p.add_argument("--isPrivate", dest="is_private", action="store_true", help="Is the new repo private?")
    p.add_argument("--createRepo", dest="create_repo", action="store_true", help="Create a repo")
    p.add_argument("--getrepos", dest="get_repos", action="store_true", help="Get all repos for the authenticated user")
    p.add_argument("--createIssue", dest="create_issue", action="store_true", help="Open an issue on owner/repoName")
    p.add_argument("--config", help="Path to config.toml (defaults to ./config.toml if present)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log requests to stderr")
    return p


def resolve_options(args: argparse.Namespace) -> CommandOptions:
    """Merge parsed flags with settings (CLI > env > config file > defaults).

    Args:
        args: Namespace from `build_parser().parse_args()`.

    Returns:
        The options `dispatch` runs with.

    Raises:
        ConfigError: If the config file cannot be used.
    """
    s = load_settings(args.config)
    return CommandOptions(
        token=args.token if args.token is not None else s.token,
        owner=args.owner if args.owner is not None else s.owner,
        repo_name=args.repo_name,
        title=args.title,
        body=args.body,
        description=args.description,
        is_private=args.is_private,
        create_repo=args.create_repo,
        get_repos=args.get_repos,
        create_issue=args.create_issue,
        api_url=s.api_url,
    )


def _report(err: GitHubClientError) -> int:
    """Print `err` for the user and return the matching exit code."""
    if isinstance(err, UsageError):
        print(err, file=sys.stderr)
        return EXIT_USAGE
    if isinstance(err, RemoteError):
        print(err)
        # print body as it may contain hints in case of errors
        if err.body:
            print(err.body)
        return EXIT_FAILURE
    print(f"error: {err}", file=sys.stderr)
    return EXIT_FAILURE


def dispatch(opts: CommandOptions) -> int:
    """Run every action requested in `opts` and return the process exit code.

    Actions run in a fixed order (create repo, list repos, create issue) and
    the first failure stops the run.
    """
    log = get_logger()
    try:
        if opts.create_repo:
            require(repo_name=opts.repo_name, token=opts.token)
            print(f"Creating repo: {opts.repo_name}")
            create_repo(opts.repo_name, opts.description, opts.is_private, opts.token, api_url=opts.api_url)
            print(f"Created repo: {opts.repo_name}")

        if opts.get_repos:
            repos = list_repos(opts.owner, opts.token, api_url=opts.api_url)
            log.debug("Received %d repos", len(repos))
            print(pretty_print(repos))

        if opts.create_issue:
            create_issue(opts.owner, opts.repo_name, opts.title, opts.token, opts.body, api_url=opts.api_url)
            print(f"Created issue in {opts.owner}/{opts.repo_name}: {opts.title}")
    except GitHubClientError as e:
        log.debug("Command failed: %r", e)
        return _report(e)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    Raises:
        SystemExit: Always, with the exit code from `dispatch` (or 2 from
            argparse on malformed arguments, or from a bad config file).
    """
    args = build_parser().parse_args(argv)
    log = init_logger("ghrepo", verbose=args.verbose)
    try:
        opts = resolve_options(args)
    except GitHubClientError as e:
        sys.exit(_report(e))
    log.debug("Using API at %s", opts.api_url)
    sys.exit(dispatch(opts))


if __name__ == "__main__":
    main()
