"""
GitHub Actions Variables Sync

Reconcile a local CSV file of variables against GitHub Actions variables,
at repository level or scoped to a deployment environment.
"""

__version__ = "1.0.0"
__author__ = "GitHub Variables Sync"
__description__ = "Sync GitHub Actions variables from a CSV file"

from .config.settings import SyncSettings
from .sync.sync_manager import SyncManager

__all__ = ["SyncSettings", "SyncManager"]
