"""Authentication helpers for the GitHub REST API."""

from .github_auth import GitHubTokenAuth, mask_token

__all__ = ["GitHubTokenAuth", "mask_token"]
