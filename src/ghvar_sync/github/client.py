"""Client for the GitHub Actions variables REST API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..auth.github_auth import GitHubTokenAuth
from ..exceptions import RemoteError, TransportError
from ..models import Entry, Scope

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
MAX_PER_PAGE = 100
DEFAULT_TIMEOUT = 30.0


class GitHubVariablesClient:
    """Read and write Actions variables for a repository or an environment.

    One instance is created per process and shared by every call; requests
    go through a single ``requests.Session`` so connections are kept alive.
    """

    def __init__(self, token: str, api_url: str = GITHUB_API_URL,
                 timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            token: GitHub token sent as a bearer credential
            api_url: Base URL of the REST API
            timeout: Per-request timeout in seconds
            session: Session to use instead of a fresh one
        """
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = GitHubTokenAuth(token)
        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': GITHUB_API_VERSION,
        })

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.api_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    def fetch_all(self, scope: Scope, per_page: int = MAX_PER_PAGE) -> List[Entry]:
        """Fetch every variable in the scope, following pagination.

        Pages are requested until the number fetched reaches the reported
        ``total_count`` or a page comes back empty. Entries keep the
        server's order.

        Args:
            scope: Collection to read
            per_page: Page size, capped at the API maximum of 100

        Returns:
            All variables in the collection

        Raises:
            TransportError: If the API cannot be reached
            RemoteError: If a page request does not return 200
        """
        per_page = max(1, min(per_page, MAX_PER_PAGE))
        entries: List[Entry] = []
        page = 1

        while True:
            response = self._request(
                'GET', scope.collection_path,
                params={'per_page': per_page, 'page': page}
            )
            if response.status_code != 200:
                raise RemoteError(response.status_code, response.text)

            data = self._parse_page(response)
            variables = data['variables']
            entries.extend(
                Entry(name=str(item.get('name', '')), value=str(item.get('value', '')))
                for item in variables
            )
            total_count = data['total_count']
            logger.debug(f"Page {page}: {len(variables)} variables ({len(entries)}/{total_count})")

            if not variables or len(entries) >= total_count:
                break
            page += 1

        logger.info(f"Fetched {len(entries)} variables from {scope.describe()}")
        return entries

    @staticmethod
    def _parse_page(response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise RemoteError(response.status_code, response.text,
                              f"GitHub API returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise RemoteError(response.status_code, response.text,
                              "GitHub API returned an unexpected response body")

        # A missing total_count or variables list reads as an empty last page
        total_count = data.setdefault("total_count", 0)
        variables = data.setdefault("variables", [])
        valid = (
            isinstance(total_count, int) and not isinstance(total_count, bool)
            and isinstance(variables, list)
            and all(isinstance(item, dict) for item in variables)
        )
        if not valid:
            raise RemoteError(response.status_code, response.text,
                              "GitHub API returned an unexpected response body")
        return data

    def exists(self, scope: Scope, name: str) -> bool:
        """Check whether a variable exists in the scope.

        Any status other than 200, including 404, counts as absent.

        Raises:
            TransportError: If the API cannot be reached
        """
        response = self._request('GET', scope.item_path(name))
        return response.status_code == 200

    def create(self, scope: Scope, entry: Entry) -> None:
        """Create a variable; GitHub acknowledges with 201.

        Raises:
            TransportError: If the API cannot be reached
            RemoteError: If the variable was not created
        """
        response = self._request(
            'POST', scope.collection_path,
            json={'name': entry.name, 'value': entry.value}
        )
        if response.status_code != 201:
            raise RemoteError(response.status_code, response.text)
        logger.info(f"Created variable {entry.name}")

    def update(self, scope: Scope, entry: Entry) -> None:
        """Update an existing variable; GitHub acknowledges with 204.

        Raises:
            TransportError: If the API cannot be reached
            RemoteError: If the variable was not updated
        """
        response = self._request(
            'PATCH', scope.item_path(entry.name),
            json={'name': entry.name, 'value': entry.value}
        )
        if response.status_code != 204:
            raise RemoteError(response.status_code, response.text)
        logger.info(f"Updated variable {entry.name}")

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
