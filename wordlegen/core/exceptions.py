"""Custom exception hierarchy for candidate generation."""


class WordleGenError(Exception):
    """Base exception for analyzer failures."""


class ConfigurationError(WordleGenError):
    """Raised when the alphabet, engine or grid dimensions are unusable."""


class GridError(WordleGenError):
    """Raised when a write targets a cell outside the grid or an unknown symbol."""


class FeedbackParseError(WordleGenError):
    """Raised when a textual guess/feedback entry cannot be parsed."""


class CandidateLimitError(WordleGenError):
    """Raised when enumeration exceeds the configured candidate cap."""


class SolverTimeoutError(WordleGenError):
    """Raised when the CP-SAT enumeration stops before visiting every solution."""
