"""Console rendering of diffs, sync plans and results."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .auth.github_auth import mask_token
from .models import DiffResult, Scope

RULE = "━" * 40


def truncate_value(value: str, max_len: int) -> str:
    """Cut ``value`` to ``max_len`` characters, ending with ``...`` when cut."""
    if len(value) <= max_len:
        return value
    return value[:max_len - 3] + "..."


class ConsoleReporter:
    """Everything the sync tool prints for the user."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def target(self, scope: Scope):
        self.console.print("^" * 72)
        self.console.print(f"🎯 Target: {escape(scope.describe())}")

    def local_loaded(self, count: int, csv_file: Path):
        self.console.print(f"📝 Read {count} variables from {escape(str(csv_file))}")

    def fetching(self):
        self.console.print("🔍 Fetching current variables from GitHub...")

    def fetched(self, count: int):
        self.console.print(f"✅ Fetched {count} variables from GitHub", style="green")

    def diff_summary(self, diff: DiffResult):
        """Display a summary table of the diff."""
        table = Table(title="📊 DIFF SUMMARY", show_header=False, box=None)
        table.add_column("Kind")
        table.add_column("Count", justify="right")
        table.add_column("Note", style="dim")

        table.add_row("[green]✨ New[/green]", str(len(diff.new)), "")
        table.add_row("[yellow]🔄 Updated[/yellow]", str(len(diff.updated)), "")
        table.add_row("[bright_black]✅ Unchanged[/bright_black]", str(len(diff.unchanged)), "")
        if diff.remote_only:
            table.add_row("[red]⚠️  Remote only[/red]", str(len(diff.remote_only)),
                          "in GitHub, not in CSV")

        self.console.print()
        self.console.print(RULE)
        self.console.print(table)
        self.console.print(RULE)

    def detailed_diff(self, diff: DiffResult):
        """Display a line-by-line diff."""
        self.console.print("\n📝 [bold]DETAILED CHANGES:[/bold]\n")

        if diff.new:
            self.console.print("[NEW VARIABLES]", style="green bold", markup=False)
            for entry in diff.new:
                self.console.print(f"+ {entry.name} = {truncate_value(entry.value, 80)}",
                                   style="green", markup=False)
            self.console.print()

        if diff.updated:
            self.console.print("[UPDATED VARIABLES]", style="yellow bold", markup=False)
            for change in diff.updated:
                self.console.print(f"~ {change.name}:", style="yellow", markup=False)
                self.console.print(f"  - {truncate_value(change.old_value, 60)}", style="red", markup=False)
                self.console.print(f"  + {truncate_value(change.new_value, 60)}", style="green", markup=False)
            self.console.print()

        # Unchanged variables are only counted
        if diff.unchanged:
            self.console.print("[UNCHANGED]", style="bright_black", markup=False)
            self.console.print(f"{len(diff.unchanged)} variable(s) with no changes", style="bright_black")
            self.console.print()

        if diff.remote_only:
            self.console.print("[REMOTE ONLY - in GitHub but not in CSV]", style="red bold", markup=False)
            self.console.print("Note: These will NOT be deleted from GitHub", style="bright_black")
            for entry in diff.remote_only:
                self.console.print(f"- {entry.name} = {truncate_value(entry.value, 80)}",
                                   style="red", markup=False)
            self.console.print()

    def diff_only(self):
        self.console.print("ℹ️  Diff mode: No changes were made")

    def nothing_to_do(self):
        self.console.print("\n✅ No changes to sync. All variables are up to date!", style="green")

    def backing_up(self):
        self.console.print("\n💾 Creating backup...")

    def backup_saved(self, backup_path: Path):
        self.console.print(f"✅ Backup saved: {escape(str(backup_path))}", style="green")

    def backup_failed(self, error: Exception):
        self.console.print(f"⚠️  Warning: Failed to create backup: {escape(str(error))}", style="yellow")

    def sync_configuration(self, scope: Scope, token: str, diff: DiffResult):
        """Show where the sync will write and what it will change."""
        self.console.print()
        self.console.print(RULE)
        self.console.print("📋 [bold]SYNC CONFIGURATION[/bold]")
        self.console.print(RULE)
        self.console.print(f"Repository:  {escape(scope.owner)}/{escape(scope.repo)}")
        if scope.is_environment:
            self.console.print(f"Environment: {escape(scope.environment)}")
            self.console.print("Target:      Environment-specific variables")
        else:
            self.console.print("Environment: (none)")
            self.console.print("Target:      Repository-level variables")
        self.console.print(f"Token:       {mask_token(token)}")
        self.console.print(RULE)

        total = len(diff.new) + len(diff.updated)
        self.console.print(
            f"\n📦 Will sync {total} variable(s) ({len(diff.new)} new, {len(diff.updated)} updated)"
        )

    def cancelled(self):
        self.console.print("\n❌ Sync cancelled by user", style="red")

    def starting_sync(self):
        self.console.print("\n🚀 Starting sync...\n")

    def outcome(self, outcome):
        if outcome.action == "created":
            self.console.print(f"✅ Created variable: {escape(outcome.name)}", style="green")
        elif outcome.action == "updated":
            self.console.print(f"✅ Updated variable: {escape(outcome.name)}", style="green")
        else:
            self.console.print(
                f"❌ Error syncing variable '{escape(outcome.name)}': {escape(outcome.error or '')}",
                style="red"
            )

    def results(self, report):
        """Display final tallies; failures are only mentioned when there were some."""
        self.console.print()
        if report.failed:
            self.console.print(
                f"🎉 Completed! Created {report.created}, Updated {report.updated}, "
                f"Failed {report.failed}, Total {report.total} variables",
                style="yellow bold"
            )
        else:
            self.console.print(
                f"🎉 Completed! Created {report.created}, Updated {report.updated}, "
                f"Total {report.total} variables",
                style="green bold"
            )

    def error(self, message: str):
        self.console.print(f"❌ {escape(message)}", style="red bold")
