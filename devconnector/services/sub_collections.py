"""Edits over the ordered experience/education lists nested in a profile.

Both helpers return new lists and leave their input untouched.
"""
from typing import Any, List, Sequence, TypeVar

T = TypeVar("T")


def prepend(entries: Sequence[T], entry: T) -> List[T]:
    """Insert ``entry`` at the front; newest entries always come first."""
    return [entry, *entries]


def remove_by_id(entries: Sequence[T], entry_id: Any) -> List[T]:
    """Drop the entry whose id matches ``entry_id``; no match is a no-op."""
    target = str(entry_id)
    return [entry for entry in entries if str(entry.id) != target]
