"""Pretty-print helpers for feedback grids and candidate sets."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import CharacterStatus

if TYPE_CHECKING:
    from ..core.models import Cell, GenerationResult, GridSnapshot


GLYPHS = {
    CharacterStatus.CORRECT: "+",
    CharacterStatus.PRESENT_WRONG_POSITION: "?",
    CharacterStatus.ABSENT: "-",
    CharacterStatus.UNSET: " ",
}


def cell_symbol(cell: Optional[Cell]) -> str:
    if cell is None:
        return " !"
    if not cell.has_value():
        return " ."
    return f"{cell.char}{GLYPHS[cell.status]}"


def format_grid(snapshot: GridSnapshot) -> str:
    width = snapshot.width
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (4 * width - 1))
    for r, row in enumerate(snapshot.rows):
        row_render = " ".join(f"{cell_symbol(snapshot.cell(r, c)):>3}" for c in range(len(row)))
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(snapshot: GridSnapshot, *, label: str | None = None, stream=None) -> None:
    """Print the feedback grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(snapshot), file=stream)


def print_candidate_stats(result: GenerationResult, *, stream=None, top: int = 5) -> None:
    """Print a summary of a generation result."""

    stream = stream or sys.stdout
    print("--- Alphabet ---", file=stream)
    print(f"  Configured:    {result.alphabet} ({len(result.alphabet)})", file=stream)
    print(f"  Prefiltered:   {result.prefiltered} ({len(result.prefiltered)})", file=stream)
    if result.required:
        print(f"  Required:      {' '.join(result.required)}", file=stream)

    print(file=stream)
    print("--- Candidates ---", file=stream)
    print(f"  Enumerated:    {result.raw_count}", file=stream)
    print(f"  Kept:          {len(result.candidates)}", file=stream)

    if result.candidates:
        print(file=stream)
        print("--- Columns ---", file=stream)
        for col, chars in enumerate(result.admissible):
            counts = Counter(word[col] for word in result.candidates if len(word) > col)
            common = " ".join(f"{ch}:{n}" for ch, n in counts.most_common(top))
            print(f"  {col:>2} [{len(chars):>2} admissible]  {common}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)
