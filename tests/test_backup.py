"""Tests for backup file naming and BackupExporter.snapshot()."""

import csv
import re
from datetime import datetime
from unittest.mock import patch

import pytest

from ghvar_sync.exceptions import BackupError, LocalIOError, TransportError
from ghvar_sync.models import Entry
from ghvar_sync.sync.backup import BackupExporter, backup_filename

from conftest import FakeVariablesClient

FIXED_TIME = datetime(2024, 3, 9, 14, 5, 7)


def test_repository_backup_filename(scope):
    assert backup_filename(scope, FIXED_TIME) == "backup_octo-org_hello-world_2024-03-09_14-05-07.csv"


def test_environment_backup_filename(env_scope):
    assert (backup_filename(env_scope, FIXED_TIME)
            == "backup_octo-org_hello-world_production_2024-03-09_14-05-07.csv")


def test_backup_filename_pattern(env_scope):
    name = backup_filename(env_scope, datetime.now())
    assert re.fullmatch(
        r"backup_octo-org_hello-world_production_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.csv", name
    )


def test_same_second_same_scope_collides(scope):
    assert backup_filename(scope, FIXED_TIME) == backup_filename(scope, FIXED_TIME.replace(microsecond=999))


def test_snapshot_writes_all_remote_variables(tmp_path, scope):
    client = FakeVariablesClient([Entry("A", "1"), Entry("B", "with,comma"), Entry("C", "")])
    exporter = BackupExporter(client, backup_dir=tmp_path / "backups", clock=lambda: FIXED_TIME)

    path = exporter.snapshot(scope)

    assert path == tmp_path / "backups" / "backup_octo-org_hello-world_2024-03-09_14-05-07.csv"
    with open(path, newline='', encoding='utf-8') as f:
        rows = list(csv.reader(f))
    assert rows == [
        ["Key", "Value", "Note"],
        ["A", "1", ""],
        ["B", "with,comma", ""],
        ["C", "", ""],
    ]


def test_snapshot_creates_nested_backup_dir(tmp_path, scope):
    backup_dir = tmp_path / "a" / "b" / "c"
    exporter = BackupExporter(FakeVariablesClient(), backup_dir=backup_dir, clock=lambda: FIXED_TIME)

    path = exporter.snapshot(scope)

    assert backup_dir.is_dir()
    assert path.read_text(encoding='utf-8').splitlines() == ["Key,Value,Note"]


def test_snapshot_wraps_fetch_failure(tmp_path, scope):
    client = FakeVariablesClient()
    client.fetch_error = TransportError("connection refused")
    exporter = BackupExporter(client, backup_dir=tmp_path)

    with pytest.raises(BackupError) as exc_info:
        exporter.snapshot(scope)

    assert isinstance(exc_info.value.__cause__, TransportError)
    assert list(tmp_path.iterdir()) == []


def test_snapshot_wraps_directory_failure(tmp_path, scope):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    exporter = BackupExporter(FakeVariablesClient(), backup_dir=blocker / "backups")

    with pytest.raises(BackupError):
        exporter.snapshot(scope)


def test_snapshot_wraps_write_failure(tmp_path, scope):
    exporter = BackupExporter(FakeVariablesClient([Entry("A", "1")]), backup_dir=tmp_path)

    with patch("ghvar_sync.sync.backup.write_variables_csv",
               side_effect=LocalIOError("disk full")):
        with pytest.raises(BackupError) as exc_info:
            exporter.snapshot(scope)

    assert isinstance(exc_info.value.__cause__, LocalIOError)
    assert "disk full" in str(exc_info.value)


def test_snapshot_uses_configured_page_size(tmp_path, scope):
    client = FakeVariablesClient()
    calls = []
    client.fetch_all = lambda s, per_page=100: calls.append(per_page) or []
    BackupExporter(client, backup_dir=tmp_path, per_page=25).snapshot(scope)
    assert calls == [25]
