import pymupdf

from cvscoring.extraction.base import BaseDocumentExtractor
from cvscoring.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseDocumentExtractor):
    """Extracts the text layer of a PDF using PyMuPDF."""

    def extract(self, data: bytes) -> str:
        pages: list[str] = []
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                for page in doc:
                    pages.append(page.get_text())
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionError(
                f"pymupdf extraction failed: {exc}",
                partial_text="\n".join(pages).strip(),
            ) from exc
