"""Shared fixtures: fake GitHub client, scripted prompt and a captured console."""

import io
from typing import Dict, List, Optional

import pytest
from rich.console import Console

from ghvar_sync.display import ConsoleReporter
from ghvar_sync.models import Entry, Scope


class FakeVariablesClient:
    """In-memory stand-in for GitHubVariablesClient."""

    def __init__(self, remote: Optional[List[Entry]] = None):
        self.remote: Dict[str, str] = {e.name: e.value for e in (remote or [])}
        self.fetch_error: Optional[Exception] = None
        self.create_errors: Dict[str, Exception] = {}
        self.update_errors: Dict[str, Exception] = {}
        self.calls: List[tuple] = []

    def fetch_all(self, scope, per_page=100):
        self.calls.append(('fetch_all', scope))
        if self.fetch_error:
            raise self.fetch_error
        return [Entry(name, value) for name, value in self.remote.items()]

    def exists(self, scope, name):
        self.calls.append(('exists', name))
        return name in self.remote

    def create(self, scope, entry):
        self.calls.append(('create', entry.name))
        if entry.name in self.create_errors:
            raise self.create_errors[entry.name]
        self.remote[entry.name] = entry.value

    def update(self, scope, entry):
        self.calls.append(('update', entry.name))
        if entry.name in self.update_errors:
            raise self.update_errors[entry.name]
        self.remote[entry.name] = entry.value

    def mutations(self):
        return [call for call in self.calls if call[0] in ('create', 'update')]


class ScriptedPrompt:
    """Answers confirmations from a fixed list and records the questions."""

    def __init__(self, *answers: bool):
        self.answers = list(answers)
        self.questions: List[str] = []

    def confirm(self, message: str) -> bool:
        self.questions.append(message)
        return self.answers.pop(0) if self.answers else False


@pytest.fixture
def scope():
    return Scope(owner="octo-org", repo="hello-world")


@pytest.fixture
def env_scope():
    return Scope(owner="octo-org", repo="hello-world", environment="production")


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def reporter(output):
    return ConsoleReporter(Console(file=output, width=120, color_system=None))


@pytest.fixture
def write_csv(tmp_path):
    """Write a variables CSV with a header and return its path."""
    def _write(rows, name="variables.csv", header="Key,Value,Note"):
        path = tmp_path / name
        lines = [header] + list(rows)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write

