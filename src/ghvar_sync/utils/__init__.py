"""Utility functions and helpers."""

from .logging import setup_logging
from .file_utils import read_variables_csv, write_variables_csv

__all__ = ["setup_logging", "read_variables_csv", "write_variables_csv"]
