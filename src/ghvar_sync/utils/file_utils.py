"""CSV file helpers for variable lists and backups."""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from ..exceptions import LocalIOError
from ..models import Entry

logger = logging.getLogger(__name__)

BACKUP_HEADER = ["Key", "Value", "Note"]


def read_variables_csv(csv_path: Union[str, Path]) -> List[Entry]:
    """Read variables from a CSV file.

    The first row is a header and is skipped. Column 1 is the name, column 2
    the value; anything after that is ignored. Both columns are trimmed and
    rows whose name ends up empty are dropped.

    Args:
        csv_path: Path to the CSV file

    Returns:
        Entries in file order

    Raises:
        LocalIOError: If the file cannot be read or parsed
    """
    csv_path = Path(csv_path)
    entries = []
    try:
        with open(csv_path, 'r', encoding='utf-8', newline='') as f:
            reader = csv.reader(f, strict=True)
            try:
                next(reader)
            except StopIteration:
                raise LocalIOError(f"{csv_path} is empty, expected a header row")

            for row in reader:
                if len(row) < 2:
                    continue
                name = row[0].strip()
                value = row[1].strip()
                if name:
                    entries.append(Entry(name=name, value=value))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LocalIOError(f"Cannot read {csv_path}: {e}") from e

    logger.debug(f"Read {len(entries)} variables from {csv_path}")
    return entries


def write_variables_csv(entries: Iterable[Entry], csv_path: Union[str, Path]) -> None:
    """Write variables to a CSV file with a ``Key,Value,Note`` header.

    The note column is always empty.

    Raises:
        LocalIOError: If the file cannot be created or a row cannot be written
    """
    csv_path = Path(csv_path)
    try:
        with open(csv_path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(BACKUP_HEADER)
            for entry in entries:
                writer.writerow([entry.name, entry.value, ""])
    except (OSError, csv.Error) as e:
        raise LocalIOError(f"Cannot write {csv_path}: {e}") from e
