import io

from docx import Document

from cvscoring.extraction.base import BaseDocumentExtractor
from cvscoring.extraction.exceptions import ExtractionError


class DocxAdapter(BaseDocumentExtractor):
    """Extracts raw text from a DOCX document using python-docx.

    Paragraph text comes first, followed by the text of table cells.
    """

    def extract(self, data: bytes) -> str:
        try:
            document = Document(io.BytesIO(data))
            parts = [p.text for p in document.paragraphs if p.text.strip()]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        parts.append(" | ".join(cells))
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
        return "\n".join(parts).strip()
