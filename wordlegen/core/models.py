"""Data models supporting the feedback analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .constants import CharacterStatus


@dataclass(frozen=True)
class Cell:
    """A guessed character together with the feedback it received."""

    char: Optional[str] = None
    status: CharacterStatus = CharacterStatus.UNSET

    def __post_init__(self) -> None:
        if self.char:
            object.__setattr__(self, "char", self.char.upper())
        object.__setattr__(self, "status", CharacterStatus(self.status))

    def has_value(self) -> bool:
        return bool(self.char)

    def is_set(self) -> bool:
        return self.has_value() and self.status != CharacterStatus.UNSET


EMPTY_CELL = Cell()

Row = Tuple[Cell, ...]


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable view of the input grid taken at generation time.

    Rows may be ragged when built from raw data; a row that is too short has
    no cell at the missing columns.
    """

    rows: Tuple[Row, ...] = ()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "GridSnapshot":
        return cls(rows=tuple(tuple(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at ``(row, col)`` or ``None`` when it is missing or invalid."""

        if not 0 <= row < len(self.rows):
            return None
        cells = self.rows[row]
        if not 0 <= col < len(cells):
            return None
        entry = cells[col]
        return entry if isinstance(entry, Cell) else None

    def iter_cells(self):
        """Yield ``(row, col, cell)`` for every valid cell; invalid entries are skipped."""

        for r, row in enumerate(self.rows):
            for c, cell in enumerate(row):
                if isinstance(cell, Cell):
                    yield r, c, cell


@dataclass
class GenerationResult:
    """Candidates plus the intermediate values that produced them."""

    alphabet: str
    prefiltered: str
    admissible: List[str]
    required: List[str]
    raw_count: int
    candidates: List[str]
    validation_messages: List[str] = field(default_factory=list)

    def to_jsonable(self) -> Dict[str, object]:
        return {
            "alphabet": self.alphabet,
            "prefiltered": self.prefiltered,
            "admissible": list(self.admissible),
            "required": list(self.required),
            "raw_count": self.raw_count,
            "count": len(self.candidates),
            "candidates": list(self.candidates),
            "validation": list(self.validation_messages),
        }
