"""Text format for guesses and their feedback.

A guess is written ``WORD:PATTERN`` where each pattern code describes the
character above it:

- ``G`` correct position
- ``Y`` present, wrong position
- ``X``, ``B`` or ``.`` absent
- ``_`` unset

An ``_`` in the word leaves that cell empty.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..core.constants import CharacterStatus
from ..core.exceptions import FeedbackParseError
from ..core.models import Cell


STATUS_CODES = {
    "G": CharacterStatus.CORRECT,
    "Y": CharacterStatus.PRESENT_WRONG_POSITION,
    "X": CharacterStatus.ABSENT,
    "B": CharacterStatus.ABSENT,
    ".": CharacterStatus.ABSENT,
    "_": CharacterStatus.UNSET,
}

STATUS_SYMBOLS = {
    CharacterStatus.CORRECT: "G",
    CharacterStatus.PRESENT_WRONG_POSITION: "Y",
    CharacterStatus.ABSENT: "X",
    CharacterStatus.UNSET: "_",
}

EMPTY_MARK = "_"


def parse_guess(text: str) -> List[Cell]:
    """Parse one ``WORD:PATTERN`` entry into a row of cells."""

    entry = text.strip()
    word, sep, pattern = entry.rpartition(":")
    if not sep or not word:
        raise FeedbackParseError(f"Expected WORD:PATTERN, got {text!r}")
    if len(word) != len(pattern):
        raise FeedbackParseError(
            f"Word and pattern lengths differ in {text!r} ({len(word)} vs {len(pattern)})"
        )
    cells: List[Cell] = []
    for index, (char, code) in enumerate(zip(word, pattern.upper())):
        if code not in STATUS_CODES:
            raise FeedbackParseError(f"Unknown feedback code {code!r} at position {index} in {text!r}")
        status = STATUS_CODES[code]
        if char == EMPTY_MARK:
            if status != CharacterStatus.UNSET:
                raise FeedbackParseError(f"Empty cell at position {index} cannot carry feedback in {text!r}")
            cells.append(Cell())
            continue
        cells.append(Cell(char=char.upper(), status=status))
    return cells


def format_feedback(row: Sequence[Cell]) -> str:
    """Render a row back into ``WORD:PATTERN`` form."""

    word = "".join(cell.char if cell.has_value() else EMPTY_MARK for cell in row)
    pattern = "".join(
        STATUS_SYMBOLS[cell.status] if cell.has_value() else EMPTY_MARK for cell in row
    )
    return f"{word}:{pattern}"


def parse_guesses_file(path: Path) -> List[List[Cell]]:
    """Read guesses from a file, one per line. Blank lines and # comments are skipped."""

    rows: List[List[Cell]] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(parse_guess(line))
    return rows


__all__ = ["parse_guess", "format_feedback", "parse_guesses_file", "STATUS_CODES"]
