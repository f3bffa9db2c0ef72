"""Dispatches raw documents to format adapters by file extension."""

from collections.abc import Mapping, Sequence
from pathlib import PurePosixPath

from cvscoring.extraction.base import BaseDocumentExtractor
from cvscoring.extraction.exceptions import ExtractionError
from cvscoring.extraction.models import ExtractionResult
from cvscoring.extraction.plain_text_adapter import PlainTextAdapter
from cvscoring.logging.logger import Log


def file_extension(file_name: str | None) -> str:
    """Return the lower-cased extension of *file_name* without the dot."""
    if not file_name:
        return ""
    return PurePosixPath(file_name.strip()).suffix.lower().lstrip(".")


class TextExtractor:
    """Converts a raw document into plain text. Never raises.

    Each format maps to an ordered list of adapters; the next adapter is tried
    when one fails. Unknown formats are decoded as UTF-8 text.
    """

    def __init__(
        self,
        adapters: Mapping[str, Sequence[BaseDocumentExtractor]],
        fallback: BaseDocumentExtractor | None = None,
    ) -> None:
        self._adapters = {fmt.lower(): list(chain) for fmt, chain in adapters.items()}
        self._fallback = fallback if fallback is not None else PlainTextAdapter()

    def extract(self, file_name: str | None, data: bytes) -> str:
        return self.extract_result(file_name, data).text

    def extract_result(self, file_name: str | None, data: bytes) -> ExtractionResult:
        fmt = file_extension(file_name)
        chain = self._adapters.get(fmt) or [self._fallback]
        best_partial = ""
        errors: list[str] = []

        for adapter in chain:
            try:
                text = adapter.extract(data)
            except ExtractionError as exc:
                Log.warning(f"Extraction of '{file_name}' failed: {exc}")
                errors.append(str(exc))
                if len(exc.partial_text) > len(best_partial):
                    best_partial = exc.partial_text
                continue
            except Exception as exc:
                Log.exception(f"Unexpected extraction error for '{file_name}': {exc}")
                errors.append(str(exc))
                continue
            if text.strip():
                Log.info(f"Extracted {len(text)} chars from '{file_name}'")
                return ExtractionResult(text=text, file_format=fmt or "unknown")
            errors.append(f"{type(adapter).__name__} returned no text")

        if not errors:
            errors.append("no text available")
        Log.warning(
            f"No usable text extracted from '{file_name}' ({len(data)} bytes), "
            f"keeping {len(best_partial)} chars of partial text"
        )
        return ExtractionResult(
            text=best_partial,
            file_format=fmt or "unknown",
            degraded=True,
            error_message="; ".join(errors),
        )
