class AnalysisError(Exception):
    """Base exception for CV analysis errors."""


class AnalysisValidationError(AnalysisError):
    """Raised when an analysis payload does not match the AnalysisResult shape."""


class AnalysisNotFoundError(AnalysisError):
    """Raised when no cached analysis exists for an application."""


class CvNotFoundError(AnalysisError):
    """Raised when no CV file is stored for an application."""
