"""Backtracking enumeration of candidate strings."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from ..core.exceptions import CandidateLimitError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

AdmissibleFn = Callable[[int], str]


def iter_candidates(admissible: AdmissibleFn) -> Iterator[str]:
    """Yield every string choosing one admissible character per column.

    The walk is depth-first with an explicit stack, so candidates come out in
    alphabet-index order. A column whose admissible set is empty terminates
    the candidate at that length.
    """

    buffer: List[str] = []
    # Each frame holds the remaining characters to try at its column.
    stack: List[Iterator[str]] = []

    first = admissible(0)
    if not first:
        yield ""
        return
    stack.append(iter(first))

    while stack:
        choice = next(stack[-1], None)
        if choice is None:
            stack.pop()
            if buffer:
                buffer.pop()
            continue
        buffer.append(choice)
        following = admissible(len(buffer))
        if following:
            stack.append(iter(following))
        else:
            yield "".join(buffer)
            buffer.pop()


def build_candidates(admissible: AdmissibleFn, limit: Optional[int] = None) -> List[str]:
    """Collect :func:`iter_candidates` into a list, honoring an optional cap."""

    words: List[str] = []
    for word in iter_candidates(admissible):
        if limit is not None and len(words) >= limit:
            raise CandidateLimitError(f"More than {limit} candidates would be generated")
        words.append(word)
    LOGGER.debug("Enumerated %d raw candidates", len(words))
    return words
