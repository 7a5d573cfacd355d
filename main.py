"""CLI entrypoint for the Wordle-style candidate generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordlegen.core.constants import AbsentPolicy, AlphabetMode, Engine
from wordlegen.core.exceptions import WordleGenError
from wordlegen.core.models import Cell
from wordlegen.engine.generator import CandidateGenerator, GeneratorConfig
from wordlegen.io.feedback import parse_guess, parse_guesses_file
from wordlegen.utils.logger import configure_logging
from wordlegen.utils.pretty import pretty_print_grid, print_candidate_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List every string consistent with Wordle-style guess feedback",
    )
    parser.add_argument("--rows", type=int, default=5, help="Number of guesses in the grid")
    parser.add_argument("--columns", type=int, default=5, help="Characters per guess")
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in AlphabetMode],
        default=AlphabetMode.LETTERS_ONLY.value,
        help="Symbol set candidates are drawn from",
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        default=None,
        help="Explicit alphabet overriding --mode (e.g. CAT)",
    )
    parser.add_argument(
        "--guess",
        action="append",
        metavar="WORD:PATTERN",
        help="A guess with feedback codes G (correct), Y (misplaced), X (absent), _ (unset)",
    )
    parser.add_argument(
        "--guesses-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD:PATTERN entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--engine",
        type=str,
        choices=[e.value for e in Engine],
        default=Engine.BACKTRACKING.value,
        help="Enumeration backend",
    )
    parser.add_argument(
        "--absent-policy",
        type=str,
        choices=[p.value for p in AbsentPolicy],
        default=AbsentPolicy.GLOBAL.value,
        help="How absent marks interact with other marks of the same character",
    )
    parser.add_argument(
        "--max-candidates",
        type=int,
        default=None,
        help="Abort when more candidates than this would be enumerated",
    )
    parser.add_argument("--stats", action="store_true", help="Print a summary to stderr")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    config = GeneratorConfig(
        rows=args.rows,
        columns=args.columns,
        alphabet_mode=args.mode,
        alphabet=args.alphabet,
        engine=args.engine,
        absent_policy=args.absent_policy,
        max_candidates=args.max_candidates,
    )

    try:
        rows: List[List[Cell]] = []
        if args.guess:
            rows.extend(parse_guess(entry) for entry in args.guess)
        if args.guesses_file:
            rows.extend(parse_guesses_file(args.guesses_file))
        if len(rows) > config.rows:
            parser.error(f"{len(rows)} guesses given but the grid has {config.rows} rows")

        generator = CandidateGenerator(config)
        grid = generator.new_grid()
        for index, row in enumerate(rows):
            grid.set_row(index, row)
        result = generator.analyze(grid)
    except WordleGenError as exc:
        parser.error(str(exc))

    if args.stats:
        pretty_print_grid(grid.snapshot(), stream=sys.stderr)
        print(file=sys.stderr)
        print_candidate_stats(result, stream=sys.stderr)

    output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
