"""Wordle-style guess-feedback analyzer.

This package exposes the public API surface via:

- ``wordlegen.engine.generator.CandidateGenerator``: computes candidates for a grid.
- ``wordlegen.engine.grid.InputGrid``: holds guesses and their feedback.
- ``wordlegen.engine.alphabet.build_alphabet``: symbol sets per alphabet mode.
"""

from .core.constants import AbsentPolicy, AlphabetMode, CharacterStatus, Engine
from .core.models import Cell, GenerationResult, GridSnapshot
from .engine.alphabet import build_alphabet
from .engine.generator import CandidateGenerator, GeneratorConfig
from .engine.grid import GridConfig, InputGrid

__all__ = [
    "AbsentPolicy",
    "AlphabetMode",
    "CandidateGenerator",
    "Cell",
    "CharacterStatus",
    "Engine",
    "GenerationResult",
    "GeneratorConfig",
    "GridConfig",
    "GridSnapshot",
    "InputGrid",
    "build_alphabet",
]

__version__ = "0.1.0"
