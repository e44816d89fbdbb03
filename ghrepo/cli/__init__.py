"""Command-line interface for ghrepo."""

from .main import main, dispatch, CommandOptions

__all__ = ["main", "dispatch", "CommandOptions"]
