"""Shared constants and enumerations for the feedback analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "1234567890"
OPERATORS = "!()*+-./<=>^"

DEFAULT_ROWS = 5
DEFAULT_COLUMNS = 5


class CharacterStatus(str, Enum):
    """Feedback attached to a single guessed character."""

    UNSET = "UNSET"
    CORRECT = "CORRECT"
    PRESENT_WRONG_POSITION = "PRESENT_WRONG_POSITION"
    ABSENT = "ABSENT"


class AlphabetMode(str, Enum):
    """Symbol ranges a puzzle may draw from."""

    LETTERS_ONLY = "letters_only"
    LETTERS_AND_DIGITS = "letters_and_digits"
    DIGITS_ONLY = "digits_only"
    DIGITS_AND_OPERATORS = "digits_and_operators"


class Engine(str, Enum):
    """Candidate enumeration backends."""

    BACKTRACKING = "backtracking"
    CPSAT = "cpsat"


class AbsentPolicy(str, Enum):
    """How an ABSENT mark interacts with other marks of the same character."""

    GLOBAL = "global"
    ROW_AWARE = "row_aware"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
