"""CP-SAT candidate enumeration using OR-Tools.

Produces the same candidates as the backtracking builder followed by the
required-character filter, with required characters expressed as model
constraints instead of a post-pass.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.exceptions import CandidateLimitError, SolverTimeoutError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class _SolutionCollector(cp_model.CpSolverSolutionCallback):
    """Records every assignment; stops the search once ``limit`` is exceeded."""

    def __init__(self, variables: List[cp_model.IntVar], limit: Optional[int]) -> None:
        super().__init__()
        self._variables = variables
        self._limit = limit
        self.solutions: List[Tuple[int, ...]] = []
        self.overflowed = False

    def on_solution_callback(self) -> None:
        if self._limit is not None and len(self.solutions) >= self._limit:
            self.overflowed = True
            self.stop_search()
            return
        self.solutions.append(tuple(self.value(var) for var in self._variables))


def solve_candidates(
    columns: Sequence[str],
    required: Sequence[str],
    limit: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[str]:
    """Enumerate candidates via CP-SAT.

    Args:
        columns: Admissible characters per column, in alphabet order, up to
            (not including) the first empty column.
        required: Characters every candidate must contain.
        limit: Optional cap on the number of candidates.
        timeout: Optional solver time limit in seconds.

    Returns:
        Candidates ordered as the depth-first builder would emit them.
    """
    if not columns:
        return [] if required else [""]

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One variable per column over admissible indexes
    # ------------------------------------------------------------------
    variables: List[cp_model.IntVar] = []
    for col, chars in enumerate(columns):
        domain = cp_model.Domain.from_values(list(range(len(chars))))
        variables.append(model.new_int_var_from_domain(domain, f"C_{col}"))

    # ------------------------------------------------------------------
    # Step 2: Each required character appears in at least one column
    # ------------------------------------------------------------------
    for char in dict.fromkeys(required):
        hits = []
        for col, chars in enumerate(columns):
            index = chars.find(char)
            if index < 0:
                continue
            b = model.new_bool_var(f"has_{ord(char)}_{col}")
            model.add(variables[col] == index).only_enforce_if(b)
            model.add(variables[col] != index).only_enforce_if(~b)
            hits.append(b)
        if not hits:
            LOGGER.debug("Required character %r is admissible nowhere", char)
            return []
        model.add_bool_or(hits)

    # ------------------------------------------------------------------
    # Step 3: Enumerate all solutions
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1
    if timeout is not None:
        solver.parameters.max_time_in_seconds = timeout

    collector = _SolutionCollector(variables, limit)
    status = solver.solve(model, collector)

    if collector.overflowed:
        raise CandidateLimitError(f"More than {limit} candidates would be generated")
    if status == cp_model.INFEASIBLE:
        LOGGER.info("CP-SAT: no candidates")
        return []
    # With enumerate_all_solutions only OPTIMAL means the search was exhaustive.
    if status != cp_model.OPTIMAL:
        raise SolverTimeoutError(
            f"CP-SAT stopped after {len(collector.solutions)} candidates "
            f"(status={solver.status_name(status)})"
        )

    LOGGER.info(
        "CP-SAT: %d candidates over %d columns in %.2fs",
        len(collector.solutions),
        len(columns),
        solver.wall_time,
    )

    # ------------------------------------------------------------------
    # Step 4: Decode in depth-first order
    # ------------------------------------------------------------------
    return [
        "".join(columns[col][index] for col, index in enumerate(solution))
        for solution in sorted(collector.solutions)
    ]
