"""GitHub token authentication handling."""

import requests


class GitHubTokenAuth(requests.auth.AuthBase):
    """Attach a bearer token to every request sent through a session."""

    def __init__(self, token: str):
        """Initialize GitHub token authentication.

        Args:
            token: Personal access token or fine-grained token
        """
        self.token = token

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers['Authorization'] = f'Bearer {self.token}'
        return request

    def __repr__(self) -> str:
        return f"GitHubTokenAuth(token='{mask_token(self.token)}')"


def mask_token(token: str) -> str:
    """Mask a token for display, keeping the first and last 4 characters.

    Args:
        token: Token to mask

    Returns:
        Masked token, or ``****`` for tokens too short to partially show
    """
    if len(token) <= 8:
        return "****"
    return token[:4] + "*" * (len(token) - 8) + token[-4:]
