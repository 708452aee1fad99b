"""Snapshots of remote variables written to timestamped CSV files."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from ..exceptions import BackupError, LocalIOError, RemoteError, TransportError
from ..github.client import GitHubVariablesClient
from ..utils.file_utils import write_variables_csv
from ..models import Scope

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def backup_filename(scope: Scope, timestamp: datetime) -> str:
    """Build ``backup_<owner>_<repo>[_<environment>]_<YYYY-MM-DD_HH-MM-SS>.csv``.

    Two snapshots of the same scope within one second share a name; the
    later one overwrites the earlier.
    """
    parts = ["backup", scope.owner, scope.repo]
    if scope.is_environment:
        parts.append(scope.environment)
    parts.append(timestamp.strftime(TIMESTAMP_FORMAT))
    return "_".join(parts) + ".csv"


class BackupExporter:
    """Write the current remote variables of a scope to a backup file.

    Backups are for people to restore from; the tool never reads them back.
    """

    def __init__(self, client: GitHubVariablesClient, backup_dir: Union[str, Path] = "backups",
                 per_page: int = 100, clock: Optional[Callable[[], datetime]] = None):
        """Initialize the exporter.

        Args:
            client: Client used to fetch the remote variables
            backup_dir: Directory receiving backup files, created on demand
            per_page: Page size used for the fetch
            clock: Returns the snapshot timestamp (defaults to local time)
        """
        self.client = client
        self.backup_dir = Path(backup_dir)
        self.per_page = per_page
        self.clock = clock or datetime.now

    def snapshot(self, scope: Scope) -> Path:
        """Fetch every variable in the scope and write it to a new backup file.

        A write failure can leave a partial file behind.

        Returns:
            Path of the backup file

        Raises:
            BackupError: Wrapping the fetch or write failure
        """
        try:
            variables = self.client.fetch_all(scope, per_page=self.per_page)
        except (TransportError, RemoteError) as e:
            raise BackupError(f"Failed to fetch variables: {e}") from e

        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupError(f"Failed to create backup directory {self.backup_dir}: {e}") from e

        backup_path = self.backup_dir / backup_filename(scope, self.clock())
        try:
            write_variables_csv(variables, backup_path)
        except LocalIOError as e:
            raise BackupError(f"Failed to export backup: {e}") from e

        logger.info(f"Backed up {len(variables)} variables to {backup_path}")
        return backup_path
