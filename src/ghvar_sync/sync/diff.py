"""Comparison of local and remote variable sets."""

from typing import Dict, Iterable, Set

from ..models import DiffResult, Entry, VariableChange


def compare(local: Iterable[Entry], remote: Iterable[Entry]) -> DiffResult:
    """Classify local and remote variables.

    Every local entry with a non-empty name lands in exactly one of
    ``new``, ``updated`` or ``unchanged``. Every remote entry whose name is
    not among the local names lands in ``remote_only``. Names match exactly
    and case-sensitively; values are compared verbatim.

    If ``remote`` repeats a name, the last occurrence wins for lookups.

    Args:
        local: Variables from the local file
        remote: Variables currently on GitHub

    Returns:
        A fresh DiffResult; inputs are not modified
    """
    local = list(local)
    remote = list(remote)
    result = DiffResult()

    remote_values: Dict[str, str] = {}
    for entry in remote:
        remote_values[entry.name] = entry.value

    for entry in local:
        if not entry.name:
            continue

        if entry.name not in remote_values:
            result.new.append(entry)
        elif remote_values[entry.name] != entry.value:
            result.updated.append(VariableChange(
                name=entry.name,
                old_value=remote_values[entry.name],
                new_value=entry.value,
            ))
        else:
            result.unchanged.append(entry)

    local_names: Set[str] = {entry.name for entry in local if entry.name}
    result.remote_only = [entry for entry in remote if entry.name not in local_names]

    return result
