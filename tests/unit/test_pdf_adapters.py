import pytest

from cvscoring.extraction.exceptions import ExtractionError
from cvscoring.extraction.pdfplumber_adapter import PdfPlumberAdapter
from cvscoring.extraction.pymupdf_adapter import PyMuPdfAdapter


@pytest.fixture(params=[PdfPlumberAdapter, PyMuPdfAdapter], ids=["pdfplumber", "pymupdf"])
def adapter(request: pytest.FixtureRequest) -> PdfPlumberAdapter | PyMuPdfAdapter:
    return request.param()


class TestPdfAdapters:
    def test_extract_returns_text(self, adapter, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = adapter.extract(sample_pdf_bytes)
        assert isinstance(result, str)
        assert "Hello PDF World" in result

    def test_extract_multi_page(self, adapter, multi_page_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = adapter.extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_empty_pdf_returns_empty_string(self, adapter, empty_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        assert adapter.extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self, adapter) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(ExtractionError) as exc_info:
            adapter.extract(b"not a pdf")
        assert exc_info.value.partial_text == ""

    def test_extract_result_is_stripped(self, adapter, sample_pdf_bytes: bytes) -> None:  # type: ignore[no-untyped-def]
        result = adapter.extract(sample_pdf_bytes)
        assert result == result.strip()
