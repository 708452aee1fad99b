"""Data models shared by the diff engine, the client and the sync driver."""

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote


@dataclass(frozen=True)
class Entry:
    """A single variable: name and opaque string value."""
    name: str
    value: str


@dataclass(frozen=True)
class Scope:
    """Which variable collection a run addresses.

    Without an environment the scope is the repository's Actions variables,
    otherwise the variables of that deployment environment.
    """
    owner: str
    repo: str
    environment: Optional[str] = None

    @property
    def is_environment(self) -> bool:
        return bool(self.environment)

    @property
    def collection_path(self) -> str:
        """API path of the variables collection, without the base URL."""
        base = f"/repos/{quote(self.owner, safe='')}/{quote(self.repo, safe='')}"
        if self.is_environment:
            return f"{base}/environments/{quote(self.environment, safe='')}/variables"
        return f"{base}/actions/variables"

    def item_path(self, name: str) -> str:
        """API path of a single variable."""
        return f"{self.collection_path}/{quote(name, safe='')}"

    def describe(self) -> str:
        if self.is_environment:
            return f"Environment '{self.environment}' in {self.owner}/{self.repo}"
        return f"Repository {self.owner}/{self.repo}"


@dataclass(frozen=True)
class VariableChange:
    """A variable present on both sides with differing values."""
    name: str
    old_value: str  # current value on GitHub
    new_value: str  # value from the local file


@dataclass
class DiffResult:
    """Classification of local and remote variables.

    ``remote_only`` is informational; those variables are never deleted.
    """
    new: List[Entry] = field(default_factory=list)
    updated: List[VariableChange] = field(default_factory=list)
    unchanged: List[Entry] = field(default_factory=list)
    remote_only: List[Entry] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.new or self.updated)

    def mutation_set(self) -> List[Entry]:
        """Entries to send to GitHub: new ones, then updated ones with their new value."""
        entries = list(self.new)
        entries.extend(Entry(change.name, change.new_value) for change in self.updated)
        return entries
