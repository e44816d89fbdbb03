"""Configuration management for ghrepo.

Settings are merged from several sources, highest priority first:
1. Command-line flags (applied by the CLI on top of the returned Settings)
2. Environment variables (a local `.env` file is loaded first)
3. TOML configuration file
4. Default values

Example config.toml:
    ```toml
    [github]
    api_url = "https://api.github.com"
    owner = "octocat"
    ```

Environment Variables:
    GITHUB_TOKEN: Token used when --token is not given.
    GITHUB_OWNER: Owner used when --owner is not given.
    GITHUB_API_URL: Override the API base URL (e.g. for GitHub Enterprise).

The token is only ever read from the command line or the environment, never
from config.toml.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
import tomllib  # Python 3.11+
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .github import GH_API


@dataclass
class Settings:
    """Runtime configuration derived from `config.toml` and environment.

    Attributes:
        api_url: Base URL of the GitHub REST API.
        token: Default auth token.
        owner: Default account name.
    """

    api_url: str = GH_API
    token: str = ""
    owner: str = ""


def load_config(path: str = "config.toml") -> dict:
    """Parse the TOML file at `path`.

    A missing file is not an error: ghrepo runs fine on flags and environment
    alone, so an empty dict is returned.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """
    p = Path(path)
    if not p.exists():
        return {}
    try:
        with p.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def _str_option(section: dict, key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"[github] {key} must be a string, got {type(value).__name__}")
    return value


def load_settings(config_path: str | None = None) -> Settings:
    """Create a `Settings` object from config file and environment variables.

    Args:
        config_path: Path to TOML config file. Defaults to "config.toml".

    Returns:
        Settings with environment values taking precedence over the file.

    Raises:
        ConfigError: If the config file is malformed or a `[github]` value
            has the wrong type.
    """
    load_dotenv(find_dotenv(usecwd=True))
    cfg = load_config(config_path or "config.toml")

    s = Settings()

    gh = cfg.get("github", {})
    if not isinstance(gh, dict):
        raise ConfigError("[github] must be a table")
    s.api_url = os.getenv("GITHUB_API_URL", _str_option(gh, "api_url", s.api_url)).rstrip("/")
    s.owner = os.getenv("GITHUB_OWNER", _str_option(gh, "owner", s.owner))
    s.token = os.getenv("GITHUB_TOKEN", s.token)

    return s
