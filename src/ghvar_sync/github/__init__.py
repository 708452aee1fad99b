"""GitHub REST API access."""

from .client import GitHubVariablesClient

__all__ = ["GitHubVariablesClient"]
