import io

import pdfplumber

from cvscoring.extraction.base import BaseDocumentExtractor
from cvscoring.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseDocumentExtractor):
    """Extracts the text layer of a PDF using pdfplumber."""

    def extract(self, data: bytes) -> str:
        pages: list[str] = []
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                for page in pdf.pages:
                    pages.append(page.extract_text() or "")
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionError(
                f"pdfplumber extraction failed: {exc}",
                partial_text="\n".join(pages).strip(),
            ) from exc
