"""Alphabet construction for the supported symbol modes."""

from __future__ import annotations

from typing import Optional, Union

from ..core.constants import DIGITS, LETTERS, OPERATORS, AlphabetMode
from ..core.exceptions import ConfigurationError

ModeLike = Union[AlphabetMode, str]


def resolve_mode(mode: ModeLike) -> AlphabetMode:
    """Coerce an enum member or its string value or name."""

    if isinstance(mode, AlphabetMode):
        return mode
    if isinstance(mode, str):
        key = mode.strip().lower().replace("-", "_")
        for member in AlphabetMode:
            if key in (member.value, member.name.lower()):
                return member
    raise ConfigurationError(f"Unsupported alphabet mode: {mode!r}")


def build_alphabet(mode: ModeLike = AlphabetMode.LETTERS_ONLY) -> str:
    """Return the ordered symbols for ``mode``: letters, then digits, then operators."""

    resolved = resolve_mode(mode)
    allow_letters = resolved in (AlphabetMode.LETTERS_ONLY, AlphabetMode.LETTERS_AND_DIGITS)
    allow_digits = resolved in (
        AlphabetMode.LETTERS_AND_DIGITS,
        AlphabetMode.DIGITS_ONLY,
        AlphabetMode.DIGITS_AND_OPERATORS,
    )
    allow_operators = resolved == AlphabetMode.DIGITS_AND_OPERATORS
    return (
        (LETTERS if allow_letters else "")
        + (DIGITS if allow_digits else "")
        + (OPERATORS if allow_operators else "")
    )


def normalize_alphabet(symbols: str) -> str:
    """Validate a caller-supplied alphabet and upper-case it."""

    if not symbols:
        raise ConfigurationError("Custom alphabet must not be empty")
    normalized = symbols.upper()
    if any(ch.isspace() for ch in normalized):
        raise ConfigurationError(f"Custom alphabet contains whitespace: {symbols!r}")
    if len(set(normalized)) != len(normalized):
        raise ConfigurationError(f"Custom alphabet contains duplicates: {symbols!r}")
    return normalized


def select_alphabet(mode: ModeLike, custom: Optional[str] = None) -> str:
    if custom is not None:
        return normalize_alphabet(custom)
    return build_alphabet(mode)


__all__ = ["build_alphabet", "normalize_alphabet", "resolve_mode", "select_alphabet"]
