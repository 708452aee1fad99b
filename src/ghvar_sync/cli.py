"""Command-line interface for the GitHub variables sync tool."""

import sys
from pathlib import Path

import click
from rich.console import Console

from . import __version__
from .config.settings import SyncSettings
from .display import ConsoleReporter
from .exceptions import (
    BackupError,
    ConfigurationError,
    LocalIOError,
    RemoteError,
    TransportError,
)
from .github.client import GitHubVariablesClient
from .prompt import ConsolePrompt
from .sync.backup import BackupExporter
from .sync.sync_manager import SyncManager
from .utils.logging import setup_logging

console = Console()


@click.command()
@click.version_option(version=__version__)
@click.option('--diff', 'diff_only',
              is_flag=True,
              help='Show diff and exit without syncing')
@click.option('--backup', 'backup_mode',
              is_flag=True,
              help='Create backup and exit without syncing')
@click.option('--no-backup',
              is_flag=True,
              help='Skip automatic backup before syncing')
@click.option('--csv-file', '-f',
              type=click.Path(dir_okay=False, path_type=Path),
              help='Local variables file (default: variables.csv)')
@click.option('--backup-dir',
              type=click.Path(file_okay=False, path_type=Path),
              help='Directory for backup files (default: backups)')
@click.option('--config', '-c', 'config_path',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='YAML file with non-credential options')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Log level for diagnostic output on stderr')
def cli(diff_only: bool, backup_mode: bool, no_backup: bool, csv_file: Path,
        backup_dir: Path, config_path: Path, log_level: str):
    """Sync GitHub Actions variables from a CSV file.

    Credentials and target come from the environment: GITHUB_TOKEN,
    GITHUB_OWNER, GITHUB_REPO and optionally GITHUB_ENVIRONMENT for
    environment-specific variables.
    """
    reporter = ConsoleReporter(console)

    try:
        options = SyncSettings.from_yaml(config_path) if config_path else {}
        cli_options = {'csv_file': csv_file, 'backup_dir': backup_dir, 'log_level': log_level}
        options.update({key: value for key, value in cli_options.items() if value is not None})
        settings = SyncSettings.from_env(**options)
    except ConfigurationError as e:
        reporter.error(str(e))
        sys.exit(1)

    try:
        setup_logging(log_level=settings.log_level, log_file=settings.log_file)
    except OSError as e:
        reporter.error(f"Cannot open log file {settings.log_file}: {e}")
        sys.exit(1)

    reporter.target(settings.scope)

    with GitHubVariablesClient(settings.token, api_url=settings.api_url,
                               timeout=settings.timeout) as client:
        exporter = BackupExporter(client, backup_dir=settings.backup_dir,
                                  per_page=settings.per_page)
        manager = SyncManager(
            client,
            settings.scope,
            settings.token,
            prompt=ConsolePrompt(console),
            reporter=reporter,
            csv_file=settings.csv_file,
            backup_exporter=exporter,
            per_page=settings.per_page,
        )

        if backup_mode:
            try:
                manager.backup_only()
            except BackupError as e:
                reporter.error(f"Error creating backup: {e}")
                sys.exit(1)
            return

        try:
            manager.run(diff_only=diff_only, skip_backup=no_backup)
        except LocalIOError as e:
            reporter.error(f"Error reading CSV file: {e}")
            sys.exit(1)
        except (TransportError, RemoteError) as e:
            reporter.error(f"Error fetching GitHub variables: {e}")
            sys.exit(1)


if __name__ == '__main__':
    cli()
