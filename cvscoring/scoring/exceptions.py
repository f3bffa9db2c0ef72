class ScoringError(Exception):
    """Base exception for compatibility scoring errors."""


class GoldenProfileMissingError(ScoringError):
    """Raised when scoring is requested for a job without a golden profile."""
