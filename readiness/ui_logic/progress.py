"""Completion percentage for the assessment form."""

from typing import Any, Mapping


def is_filled(value: Any) -> bool:
    """True for a non-blank string or a non-empty selection list."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return True


def count_non_empty(state: Mapping[str, Any]) -> int:
    return sum(1 for value in state.values() if is_filled(value))


def progress(state: Mapping[str, Any], total_field_count: int) -> int:
    """Return floor(100 * answered / total), clamped to [0, 100]."""
    if total_field_count <= 0:
        return 0
    return min(100, (100 * count_non_empty(state)) // total_field_count)


__all__ = ["count_non_empty", "is_filled", "progress"]
