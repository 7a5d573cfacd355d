"""Consistency checks over guess feedback."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Set

from ..core.constants import AbsentPolicy, CharacterStatus
from ..core.models import GridSnapshot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class FeedbackValidator:
    """Reports contradictory feedback without rejecting the grid.

    Generation always proceeds; these messages only explain why a grid may
    produce no candidates.
    """

    def __init__(self, alphabet: str, absent_policy: AbsentPolicy = AbsentPolicy.GLOBAL) -> None:
        self.alphabet = alphabet
        self.absent_policy = AbsentPolicy(absent_policy)

    def validate(self, snapshot: GridSnapshot) -> ValidationResult:
        messages: List[str] = []
        messages.extend(self._check_symbols(snapshot))
        messages.extend(self._check_conflicting_correct(snapshot))
        messages.extend(self._check_misplaced_at_correct(snapshot))
        if self.absent_policy == AbsentPolicy.GLOBAL:
            messages.extend(self._check_absent_overlap(snapshot))
        for message in messages:
            LOGGER.warning("Feedback inconsistency: %s", message)
        return ValidationResult(ok=not messages, messages=messages)

    def _check_symbols(self, snapshot: GridSnapshot) -> List[str]:
        return [
            f"Character '{cell.char}' at ({r},{c}) is not in the alphabet"
            for r, c, cell in snapshot.iter_cells()
            if cell.has_value() and cell.char not in self.alphabet
        ]

    def _check_conflicting_correct(self, snapshot: GridSnapshot) -> List[str]:
        correct: Dict[int, Set[str]] = defaultdict(set)
        for _, c, cell in snapshot.iter_cells():
            if cell.has_value() and cell.status == CharacterStatus.CORRECT:
                correct[c].add(cell.char)
        return [
            f"Column {c} has conflicting correct characters {''.join(sorted(chars))}"
            for c, chars in sorted(correct.items())
            if len(chars) > 1
        ]

    def _check_misplaced_at_correct(self, snapshot: GridSnapshot) -> List[str]:
        correct = {
            (c, cell.char)
            for _, c, cell in snapshot.iter_cells()
            if cell.has_value() and cell.status == CharacterStatus.CORRECT
        }
        return [
            f"'{cell.char}' is marked misplaced at column {c} where it is also correct"
            for _, c, cell in snapshot.iter_cells()
            if cell.has_value()
            and cell.status == CharacterStatus.PRESENT_WRONG_POSITION
            and (c, cell.char) in correct
        ]

    def _check_absent_overlap(self, snapshot: GridSnapshot) -> List[str]:
        absent: Set[str] = set()
        present: Set[str] = set()
        for _, _, cell in snapshot.iter_cells():
            if not cell.has_value():
                continue
            if cell.status == CharacterStatus.ABSENT:
                absent.add(cell.char)
            elif cell.status in (CharacterStatus.CORRECT, CharacterStatus.PRESENT_WRONG_POSITION):
                present.add(cell.char)
        return [
            f"'{char}' is marked absent and also present"
            for char in sorted(absent & present)
        ]
