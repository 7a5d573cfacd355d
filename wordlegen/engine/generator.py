"""Candidate generation orchestration.

Three steps per request:
  1. Prefilter the alphabet and derive per-column admissible sets.
  2. Enumerate candidates (backtracking or CP-SAT).
  3. Keep candidates containing every present-but-misplaced character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from ..core.constants import (DEFAULT_COLUMNS, DEFAULT_ROWS, AbsentPolicy,
                              AlphabetMode, Engine)
from ..core.exceptions import ConfigurationError
from ..core.models import Cell, GenerationResult, GridSnapshot
from ..utils.logger import get_logger
from .alphabet import ModeLike, select_alphabet
from .builder import build_candidates
from .constraints import ConstraintAnalyzer
from .filters import filter_required
from .grid import GridConfig, InputGrid
from .solver import solve_candidates
from .validator import FeedbackValidator


LOGGER = get_logger(__name__)

GridLike = Union[InputGrid, GridSnapshot, Sequence[Sequence[Cell]]]


@dataclass
class GeneratorConfig:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    alphabet_mode: ModeLike = AlphabetMode.LETTERS_ONLY
    alphabet: Optional[str] = None
    engine: Union[Engine, str] = Engine.BACKTRACKING
    absent_policy: Union[AbsentPolicy, str] = AbsentPolicy.GLOBAL
    max_candidates: Optional[int] = None
    solver_timeout: Optional[float] = None

    def to_grid_config(self) -> GridConfig:
        return GridConfig(
            rows=self.rows,
            columns=self.columns,
            alphabet=select_alphabet(self.alphabet_mode, self.alphabet),
        )


class CandidateGenerator:
    """Computes every string consistent with the feedback in a grid."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        if self.config.rows <= 0 or self.config.columns <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.config.rows}x{self.config.columns}"
            )
        if self.config.max_candidates is not None and self.config.max_candidates < 0:
            raise ConfigurationError("max_candidates must not be negative")
        self.alphabet = select_alphabet(self.config.alphabet_mode, self.config.alphabet)
        try:
            self.engine = Engine(self.config.engine)
            self.absent_policy = AbsentPolicy(self.config.absent_policy)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        self.validator = FeedbackValidator(self.alphabet, self.absent_policy)
        LOGGER.debug(
            "Configured %s engine over %d symbols (%s policy)",
            self.engine.value,
            len(self.alphabet),
            self.absent_policy.value,
        )

    def new_grid(self) -> InputGrid:
        """Return an empty input grid matching this configuration."""

        return InputGrid(self.config.to_grid_config())

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, grid: GridLike) -> List[str]:
        return self.analyze(grid).candidates

    def analyze(self, grid: GridLike) -> GenerationResult:
        snapshot = self._snapshot(grid)
        validation = self.validator.validate(snapshot)
        analyzer = ConstraintAnalyzer(self.alphabet, snapshot, self.absent_policy)
        required = analyzer.required_characters()
        columns = analyzer.columns()
        LOGGER.info(
            "Prefiltered alphabet has %d/%d symbols over %d columns",
            len(analyzer.prefiltered),
            len(self.alphabet),
            len(columns),
        )

        if self.engine == Engine.CPSAT:
            candidates = solve_candidates(
                columns,
                required,
                limit=self.config.max_candidates,
                timeout=self.config.solver_timeout,
            )
            raw_count = _product_size(columns)
        else:
            raw = build_candidates(analyzer.admissible, limit=self.config.max_candidates)
            raw_count = len(raw)
            candidates = filter_required(raw, required)

        LOGGER.info("Generated %d candidates (%d before required filter)", len(candidates), raw_count)
        return GenerationResult(
            alphabet=self.alphabet,
            prefiltered=analyzer.prefiltered,
            admissible=columns,
            required=required,
            raw_count=raw_count,
            candidates=candidates,
            validation_messages=validation.messages,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _snapshot(grid: GridLike) -> GridSnapshot:
        if isinstance(grid, GridSnapshot):
            return grid
        if isinstance(grid, InputGrid):
            return grid.snapshot()
        return GridSnapshot.from_rows(grid)


def _product_size(columns: Sequence[str]) -> int:
    size = 1
    for chars in columns:
        size *= len(chars)
    return size
