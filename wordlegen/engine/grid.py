"""Input grid holding guesses and their feedback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from ..core.constants import DEFAULT_COLUMNS, DEFAULT_ROWS, Bounds, CharacterStatus
from ..core.exceptions import ConfigurationError, GridError
from ..core.models import EMPTY_CELL, Cell, GridSnapshot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Dimensions of the guess grid."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    alphabet: Optional[str] = None

    def bounds(self) -> Bounds:
        return Bounds(rows=self.rows, cols=self.columns)


class InputGrid:
    """Mutable rows x columns matrix of cells.

    The generator never reads this object directly; it works on the
    :class:`GridSnapshot` returned by :meth:`snapshot`.
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()
        if self.config.rows <= 0 or self.config.columns <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.config.rows}x{self.config.columns}"
            )
        self.bounds = self.config.bounds()
        self.cells: List[List[Cell]] = [
            [EMPTY_CELL for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self.cells[row][col]

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot.from_rows(self.cells)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_cell(
        self,
        row: int,
        col: int,
        char: Optional[str],
        status: Union[CharacterStatus, str] = CharacterStatus.UNSET,
    ) -> None:
        self._check_bounds(row, col)
        status = CharacterStatus(status)
        symbol = self._check_symbol(char)
        if symbol is None and status != CharacterStatus.UNSET:
            raise GridError(f"Cell {(row, col)} needs a character for status {status.value}")
        self.cells[row][col] = Cell(char=symbol, status=status)

    def set_status(self, row: int, col: int, status: Union[CharacterStatus, str]) -> None:
        current = self.cell(row, col)
        self.set_cell(row, col, current.char, status)

    def set_row(self, row: int, cells: Sequence[Cell]) -> None:
        if len(cells) != self.bounds.cols:
            raise GridError(
                f"Row {row} expects {self.bounds.cols} cells, got {len(cells)}"
            )
        for col, entry in enumerate(cells):
            self.set_cell(row, col, entry.char, entry.status)

    def clear_cell(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self.cells[row][col] = EMPTY_CELL

    def clear(self) -> None:
        """Reset every cell to UNSET with no character."""

        LOGGER.debug("Clearing %sx%s grid", self.bounds.rows, self.bounds.cols)
        for r in range(self.bounds.rows):
            for c in range(self.bounds.cols):
                self.cells[r][c] = EMPTY_CELL

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_bounds(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise GridError(f"Cell outside bounds: {(row, col)}")

    def _check_symbol(self, char: Optional[str]) -> Optional[str]:
        if char is None or char == "":
            return None
        if len(char) != 1:
            raise GridError(f"Expected a single character, got {char!r}")
        symbol = char.upper()
        alphabet = self.config.alphabet
        if alphabet is not None and symbol not in alphabet:
            raise GridError(f"Character {char!r} is not in the configured alphabet")
        return symbol
