"""Post-filtering of enumerated candidates."""

from __future__ import annotations

from typing import Iterable, List, Sequence


def filter_required(candidates: Iterable[str], required: Sequence[str]) -> List[str]:
    """Keep candidates that contain every required character at least once.

    Repeated required characters re-apply the same membership test; they do
    not demand a second occurrence.
    """

    words = list(candidates)
    for char in required:
        words = [word for word in words if char in word]
    return words


__all__ = ["filter_required"]
