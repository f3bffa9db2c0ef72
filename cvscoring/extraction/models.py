from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionResult:
    """Plain text recovered from a document, plus whether recovery was degraded."""

    text: str
    file_format: str
    degraded: bool = False
    error_message: str = ""
