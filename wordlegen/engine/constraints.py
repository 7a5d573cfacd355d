"""Constraint derivation from guess feedback."""

from __future__ import annotations

from typing import Dict, List, Set

from ..core.constants import AbsentPolicy, CharacterStatus
from ..core.models import GridSnapshot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class ConstraintAnalyzer:
    """Derives the prefiltered alphabet and per-column admissible sets.

    One analyzer is bound to one snapshot; call :meth:`admissible` with any
    column index, including indexes beyond the grid width (those are empty).
    """

    def __init__(
        self,
        alphabet: str,
        snapshot: GridSnapshot,
        absent_policy: AbsentPolicy = AbsentPolicy.GLOBAL,
    ) -> None:
        self.alphabet = alphabet
        self.snapshot = snapshot
        self.absent_policy = AbsentPolicy(absent_policy)
        self.prefiltered = self._prefilter()
        self._cache: Dict[int, str] = {}

    # ------------------------------------------------------------------
    # Prefilter
    # ------------------------------------------------------------------
    def _prefilter(self) -> str:
        absent: Set[str] = set()
        for r, _, cell in self.snapshot.iter_cells():
            if not cell.has_value() or cell.status != CharacterStatus.ABSENT:
                continue
            if self.absent_policy == AbsentPolicy.ROW_AWARE and self._confirmed_in_row(r, cell.char):
                continue
            absent.add(cell.char)
        prefiltered = "".join(ch for ch in self.alphabet if ch not in absent)
        LOGGER.debug("Prefiltered alphabet %r -> %r", self.alphabet, prefiltered)
        return prefiltered

    def _confirmed_in_row(self, row: int, char: str) -> bool:
        return any(
            other.char == char
            and other.status in (CharacterStatus.CORRECT, CharacterStatus.PRESENT_WRONG_POSITION)
            for r, _, other in self.snapshot.iter_cells()
            if r == row
        )

    # ------------------------------------------------------------------
    # Per-column query
    # ------------------------------------------------------------------
    def admissible(self, col: int) -> str:
        """Characters still possible at ``col``, in alphabet order.

        Returns an empty string when any row lacks a cell at ``col``; the
        builder treats that as the end of the candidate.
        """

        if col not in self._cache:
            self._cache[col] = self._compute_admissible(col)
        return self._cache[col]

    def _compute_admissible(self, col: int) -> str:
        if not self.snapshot.rows:
            return ""
        excluded: Set[str] = set()
        for row in range(self.snapshot.height):
            cell = self.snapshot.cell(row, col)
            if cell is None:
                return ""
            if not cell.has_value():
                continue
            status = cell.status
            if status == CharacterStatus.CORRECT:
                return cell.char
            elif status == CharacterStatus.PRESENT_WRONG_POSITION:
                excluded.add(cell.char)
            elif status == CharacterStatus.ABSENT:
                if self.absent_policy == AbsentPolicy.ROW_AWARE:
                    excluded.add(cell.char)
            elif status == CharacterStatus.UNSET:
                continue
        return "".join(ch for ch in self.prefiltered if ch not in excluded)

    def columns(self) -> List[str]:
        """Admissible sets for every column up to the first empty one."""

        sets: List[str] = []
        col = 0
        while True:
            chars = self.admissible(col)
            if not chars:
                return sets
            sets.append(chars)
            col += 1

    # ------------------------------------------------------------------
    # Required characters
    # ------------------------------------------------------------------
    def required_characters(self) -> List[str]:
        """Present-but-misplaced characters in scan order, repeats kept."""

        return [
            cell.char
            for _, _, cell in self.snapshot.iter_cells()
            if cell.has_value() and cell.status == CharacterStatus.PRESENT_WRONG_POSITION
        ]
