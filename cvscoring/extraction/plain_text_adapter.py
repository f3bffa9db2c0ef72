from cvscoring.extraction.base import BaseDocumentExtractor


class PlainTextAdapter(BaseDocumentExtractor):
    """Decodes raw bytes as UTF-8, replacing undecodable sequences."""

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace").strip()
