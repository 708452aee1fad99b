"""Sync driver: fetch, compare, back up, confirm and apply."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, Union

from ..exceptions import BackupError, SyncError
from ..github.client import MAX_PER_PAGE, GitHubVariablesClient
from ..utils.file_utils import read_variables_csv
from ..utils.logging import TimedOperation
from .backup import BackupExporter
from .diff import compare
from ..models import DiffResult, Entry, Scope

logger = logging.getLogger(__name__)

CONTINUE_WITHOUT_BACKUP = "Continue without backup? (yes/no): "
PROCEED_WITH_SYNC = "\n⚠️  Do you want to proceed with the sync? (yes/no): "


class Prompt(Protocol):
    def confirm(self, message: str) -> bool:
        ...


@dataclass
class SyncOutcome:
    """What happened to one variable during the apply loop."""
    name: str
    action: str  # 'created', 'updated' or 'failed'
    error: Optional[str] = None


@dataclass
class SyncReport:
    """Result of a sync run."""
    status: str  # 'diff_only', 'nothing_to_do', 'cancelled' or 'completed'
    diff: DiffResult
    outcomes: List[SyncOutcome] = field(default_factory=list)
    backup_path: Optional[Path] = None

    def _count(self, action: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.action == action)

    @property
    def created(self) -> int:
        return self._count('created')

    @property
    def updated(self) -> int:
        return self._count('updated')

    @property
    def failed(self) -> int:
        return self._count('failed')

    @property
    def total(self) -> int:
        return len(self.outcomes)


class SyncManager:
    """Reconcile a local CSV file with the GitHub variables of one scope.

    Only new and changed variables are written. Variables that exist only on
    GitHub are reported and left alone. Writes are best effort: a failure on
    one variable is recorded and the remaining variables are still sent.
    """

    def __init__(self, client: GitHubVariablesClient, scope: Scope, token: str,
                 prompt: Prompt, reporter, csv_file: Union[str, Path] = "variables.csv",
                 backup_exporter: Optional[BackupExporter] = None, per_page: int = MAX_PER_PAGE):
        """Initialize the sync manager.
        
        Args:
            client: Shared GitHub client
            scope: Repository or environment to sync
            token: Token in use, shown masked before confirmation
            prompt: Anything with ``confirm(message) -> bool``
            reporter: Console reporter (see ``ghvar_sync.display``)
            csv_file: Local variables file
            backup_exporter: Exporter for pre-sync backups (created from ``client`` if omitted)
            per_page: Page size for fetching remote variables
        """
        self.client = client
        self.scope = scope
        self.token = token
        self.prompt = prompt
        self.reporter = reporter
        self.csv_file = Path(csv_file)
        self.backup_exporter = backup_exporter or BackupExporter(client, per_page=per_page)
        self.per_page = per_page

    def load_local(self) -> List[Entry]:
        """Read the local variables file. Raises LocalIOError."""
        entries = read_variables_csv(self.csv_file)
        self.reporter.local_loaded(len(entries), self.csv_file)
        return entries

    def fetch_remote(self) -> List[Entry]:
        """Fetch the remote variables. Raises TransportError or RemoteError."""
        self.reporter.fetching()
        with TimedOperation(logger, f"fetch of {self.scope.describe()}"):
            entries = self.client.fetch_all(self.scope, per_page=self.per_page)
        self.reporter.fetched(len(entries))
        return entries

    def backup_only(self) -> Path:
        """Write a backup of the remote variables and return its path.

        Raises:
            BackupError: If the snapshot failed
        """
        self.reporter.backing_up()
        backup_path = self.backup_exporter.snapshot(self.scope)
        self.reporter.backup_saved(backup_path)
        return backup_path

    def run(self, diff_only: bool = False, skip_backup: bool = False) -> SyncReport:
        """Run one sync.

        Args:
            diff_only: Show the diff and stop before any write
            skip_backup: Do not back up the remote variables before writing

        Returns:
            Report of what was done

        Raises:
            LocalIOError: If the local file cannot be read
            TransportError: If the remote variables cannot be fetched
            RemoteError: If the remote variables cannot be fetched
        """
        local = self.load_local()
        remote = self.fetch_remote()

        diff = compare(local, remote)
        logger.info(
            f"Diff: {len(diff.new)} new, {len(diff.updated)} updated, "
            f"{len(diff.unchanged)} unchanged, {len(diff.remote_only)} remote only"
        )
        self.reporter.diff_summary(diff)
        self.reporter.detailed_diff(diff)

        if diff_only:
            self.reporter.diff_only()
            return SyncReport(status='diff_only', diff=diff)

        to_sync = diff.mutation_set()
        if not to_sync:
            self.reporter.nothing_to_do()
            return SyncReport(status='nothing_to_do', diff=diff)

        report = SyncReport(status='cancelled', diff=diff)

        if not skip_backup:
            try:
                report.backup_path = self.backup_only()
            except BackupError as e:
                logger.info(f"Pre-sync backup failed: {e}")
                self.reporter.backup_failed(e)
                if not self.prompt.confirm(CONTINUE_WITHOUT_BACKUP):
                    self.reporter.cancelled()
                    return report

        self.reporter.sync_configuration(self.scope, self.token, diff)
        if not self.prompt.confirm(PROCEED_WITH_SYNC):
            self.reporter.cancelled()
            return report

        self.reporter.starting_sync()
        with TimedOperation(logger, f"sync of {len(to_sync)} variables"):
            for entry in to_sync:
                if not entry.name:
                    continue
                outcome = self.sync_variable(entry)
                report.outcomes.append(outcome)
                self.reporter.outcome(outcome)

        report.status = 'completed'
        logger.info(
            f"Sync completed: {report.created} created, {report.updated} updated, "
            f"{report.failed} failed"
        )
        self.reporter.results(report)
        return report

    def sync_variable(self, entry: Entry) -> SyncOutcome:
        """Create or update one variable, never raising for API failures."""
        try:
            if self.client.exists(self.scope, entry.name):
                self.client.update(self.scope, entry)
                return SyncOutcome(name=entry.name, action='updated')
            self.client.create(self.scope, entry)
            return SyncOutcome(name=entry.name, action='created')
        except SyncError as e:
            logger.info(f"Failed to sync variable {entry.name}: {e}")
            return SyncOutcome(name=entry.name, action='failed', error=str(e))
