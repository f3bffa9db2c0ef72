from cvscoring.config.settings import Settings
from cvscoring.extraction.base import BaseDocumentExtractor
from cvscoring.extraction.docx_adapter import DocxAdapter
from cvscoring.extraction.pdfplumber_adapter import PdfPlumberAdapter
from cvscoring.extraction.plain_text_adapter import PlainTextAdapter
from cvscoring.extraction.pymupdf_adapter import PyMuPdfAdapter
from cvscoring.extraction.text_extractor import TextExtractor


class ExtractorFactory:
    """Creates the text extractor with the configured PDF engines."""

    PDF_ADAPTERS: dict[str, type[BaseDocumentExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            adapters={
                "pdf": cls.create_pdf_chain(settings),
                "docx": [DocxAdapter()],
                "txt": [PlainTextAdapter()],
            },
        )

    @classmethod
    def create_pdf_chain(cls, settings: Settings) -> list[BaseDocumentExtractor]:
        chain = [cls._create_pdf_adapter(settings.pdf_engine)]
        fallback = (settings.pdf_fallback_engine or "").strip().lower()
        if fallback and fallback != settings.pdf_engine.lower():
            chain.append(cls._create_pdf_adapter(fallback))
        return chain

    @classmethod
    def _create_pdf_adapter(cls, engine: str) -> BaseDocumentExtractor:
        engine = engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
