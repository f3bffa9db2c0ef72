"""End-to-end runs over real storage, real documents and failing HTTP providers."""

import httpx
import pytest

from cvscoring.analysis.cache import AnalysisCache
from cvscoring.analysis.heuristic import HeuristicAnalyzer
from cvscoring.analysis.orchestrator import AnalysisOrchestrator
from cvscoring.config.settings import Settings
from cvscoring.extraction.factory import ExtractorFactory
from cvscoring.extraction.text_extractor import TextExtractor
from cvscoring.profiles.models import GoldenCandidateProfile
from cvscoring.profiles.storage_source import StorageGoldenProfileSource
from cvscoring.providers.chain import ProviderChain
from cvscoring.providers.ollama_provider import OllamaChatProvider
from cvscoring.scoring.scorer import CompatibilityScorer
from cvscoring.service import CvAnalysisService
from cvscoring.storage.local_storage import LocalObjectStorage
from cvscoring.worker.analysis_queue import AnalysisQueue


def _http_500_provider() -> OllamaChatProvider:
    return OllamaChatProvider(
        host="http://ollama:11434",
        model="llama3.1",
        timeout_seconds=5,
        transport=httpx.MockTransport(lambda request: httpx.Response(500, text="down")),
    )


def _ollama_returning(content: str) -> OllamaChatProvider:
    return OllamaChatProvider(
        host="http://ollama:11434",
        model="llama3.1",
        timeout_seconds=5,
        transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json={"message": {"content": content}})
        ),
    )


def _build(storage: LocalObjectStorage, chain: ProviderChain) -> CvAnalysisService:
    cache = AnalysisCache(storage, "cvs")
    orchestrator = AnalysisOrchestrator(
        extractor=ExtractorFactory.create(Settings()),
        chain=chain,
        heuristic=HeuristicAnalyzer(),
        cache=cache,
    )
    return CvAnalysisService(
        storage=storage,
        bucket="cvs",
        orchestrator=orchestrator,
        cache=cache,
        scorer=CompatibilityScorer(chain),
        profiles=StorageGoldenProfileSource(storage, "cvs"),
        queue=AnalysisQueue(),
    )


@pytest.mark.integration
class TestPipelineWithFailingProviders:
    def test_pdf_cv_analyzed_heuristically(
        self, storage: LocalObjectStorage, cv_pdf_bytes: bytes
    ) -> None:
        chain = ProviderChain([_http_500_provider(), _http_500_provider()])
        service = _build(storage, chain)

        result = service.analyze("1", cv_pdf_bytes, "cv.pdf")

        text = ExtractorFactory.create(Settings()).extract("cv.pdf", cv_pdf_bytes)
        expected = HeuristicAnalyzer().analyze(text)
        assert result.summary == expected.summary
        assert result.key_skills == expected.key_skills
        assert "react" in result.key_skills
        assert result.seniority == "senior"

    def test_queue_then_score(self, storage: LocalObjectStorage, cv_pdf_bytes: bytes) -> None:
        service = _build(storage, ProviderChain([_http_500_provider()]))
        StorageGoldenProfileSource(storage, "cvs").save(
            "7",
            GoldenCandidateProfile(
                role="frontend developer", level="senior", skills="react, typescript, aws"
            ),
        )

        with service.queue:
            job = service.submit_cv("1", "cv.pdf", cv_pdf_bytes)
            assert service.queue.join(timeout=30)

        assert job.status == "done"
        score = service.compatibility("7", "1")
        assert score.source == "heuristic"
        assert score.score == 100


@pytest.mark.integration
class TestPipelineWithWorkingProvider:
    def test_provider_result_is_cached_and_reused(
        self, storage: LocalObjectStorage, sample_docx_bytes: bytes
    ) -> None:
        content = (
            '{"summary": "Jan Nowak - mid Backend Developer.", "key_skills": ["Python", '
            '"Django"], "total_experience_years": 4, "seniority": "mid", '
            '"top_roles": ["Backend Developer"]}'
        )
        service = _build(storage, ProviderChain([_ollama_returning(content)]))

        first = service.analyze("1", sample_docx_bytes, "cv.docx")
        storage.upload("cvs", "applications/1/cv.docx", sample_docx_bytes)
        second = service.analyze_stored("1")

        assert first.key_skills == ["Python", "Django"]
        assert second.source == "cache"
        assert second.result == first

    def test_unknown_format_decoded_as_text(self, storage: LocalObjectStorage) -> None:
        service = _build(storage, ProviderChain([]))
        result = service.analyze("1", "Kotlin i Swift, 5 lat".encode(), "cv.rtf")
        assert result.key_skills == ["swift", "kotlin"]
        assert result.total_experience_years == 5

    def test_extractor_is_total_on_empty_adapter_map(self) -> None:
        assert TextExtractor({}).extract("cv.pdf", b"") == ""
