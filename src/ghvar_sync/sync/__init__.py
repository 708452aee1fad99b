"""Comparison and sync engine."""

from .diff import compare
from ..models import DiffResult, Entry, Scope, VariableChange
from .sync_manager import SyncManager, SyncOutcome, SyncReport

__all__ = [
    "compare", "DiffResult", "Entry", "Scope", "VariableChange",
    "SyncManager", "SyncOutcome", "SyncReport",
]
