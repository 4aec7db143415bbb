"""Ordered field-path lookups over loosely typed webhook payloads."""

from typing import Any

FieldPath = tuple[str, ...]


def _path(candidate: str | FieldPath) -> FieldPath:
    if isinstance(candidate, str):
        return tuple(candidate.split("."))
    return candidate


def get_path(data: Any, path: str | FieldPath) -> Any:
    """Follow a dotted path through nested dicts, returning None when any hop is missing."""

    current = data
    for key in _path(path):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def first_present(data: Any, candidates: list[str | FieldPath], default: Any = None) -> Any:
    """Return the first candidate path whose value is not None, else `default`."""

    for candidate in candidates:
        value = get_path(data, candidate)
        if value is not None:
            return value
    return default


def first_string(data: Any, candidates: list[str | FieldPath]) -> str | None:
    """Return the first candidate holding a non-empty string."""

    for candidate in candidates:
        value = get_path(data, candidate)
        if isinstance(value, str) and value:
            return value
    return None
