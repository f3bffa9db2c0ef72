"""Turns an uploaded CV into a cached AnalysisResult.

Flow: cache lookup -> text extraction -> provider chain -> validation,
falling back to the heuristic analyzer on any provider-side failure.
"""

from dataclasses import dataclass, field

from cvscoring.analysis.cache import AnalysisCache
from cvscoring.analysis.heuristic import HeuristicAnalyzer
from cvscoring.analysis.models import AnalysisOutcome, AnalysisResult, AnalysisSource
from cvscoring.analysis.validator import validate_and_build
from cvscoring.extraction.text_extractor import TextExtractor
from cvscoring.logging.logger import Log
from cvscoring.prompts.loader import ANALYSIS_PROMPT, load_prompt_template
from cvscoring.providers.chain import ProviderChain
from cvscoring.providers.exceptions import ProviderChainExhaustedError
from cvscoring.providers.models import ProviderAttempt

EXTRACTION_RISK = "Text could not be extracted from the document; manual review required"


@dataclass
class TextAnalysis:
    result: AnalysisResult
    source: AnalysisSource
    provider: str | None = None
    attempts: list[ProviderAttempt] = field(default_factory=list)
    error_message: str = ""


class AnalysisOrchestrator:
    """Runs the analysis pipeline for one application at a time."""

    def __init__(
        self,
        *,
        extractor: TextExtractor,
        chain: ProviderChain,
        heuristic: HeuristicAnalyzer,
        cache: AnalysisCache,
        max_prompt_chars: int = 16000,
        prompt_template: str | None = None,
    ) -> None:
        self._extractor = extractor
        self._chain = chain
        self._heuristic = heuristic
        self._cache = cache
        self._max_prompt_chars = max_prompt_chars
        self._prompt_template = (
            prompt_template
            if prompt_template is not None
            else load_prompt_template(ANALYSIS_PROMPT)
        )

    def analyze(
        self,
        application_id: str,
        file_bytes: bytes,
        file_name: str,
        force_refresh: bool = False,
    ) -> AnalysisResult:
        return self.run(application_id, file_bytes, file_name, force_refresh).result

    def run(
        self,
        application_id: str,
        file_bytes: bytes,
        file_name: str,
        force_refresh: bool = False,
    ) -> AnalysisOutcome:
        """Return the cached analysis or compute, cache and return a new one."""
        cached = self.lookup_cached(application_id, force_refresh)
        if cached is not None:
            return cached
        return self.compute(application_id, file_bytes, file_name)

    def lookup_cached(
        self, application_id: str, force_refresh: bool = False
    ) -> AnalysisOutcome | None:
        result = self._cache.read(application_id, force_refresh)
        if result is None:
            return None
        Log.info(f"Using cached analysis for application {application_id}")
        return AnalysisOutcome(application_id=application_id, result=result, source="cache")

    def compute(self, application_id: str, file_bytes: bytes, file_name: str) -> AnalysisOutcome:
        """Analyze the document and overwrite the cache entry."""
        Log.info(
            f"Analyzing CV '{file_name}' ({len(file_bytes)} bytes) "
            f"for application {application_id}"
        )
        extraction = self._extractor.extract_result(file_name, file_bytes)

        if extraction.degraded and not extraction.text.strip():
            Log.warning(
                f"No text for application {application_id}, using heuristic analysis only"
            )
            analysis = TextAnalysis(
                result=self._heuristic.analyze(""),
                source="heuristic",
                error_message=extraction.error_message,
            )
        else:
            analysis = self.analyze_text(extraction.text)

        result = analysis.result
        if extraction.degraded:
            result = result.with_risk(EXTRACTION_RISK)

        cache_written = self._cache.write(application_id, result)
        degraded = analysis.source == "heuristic" or extraction.degraded
        return AnalysisOutcome(
            application_id=application_id,
            result=result,
            source=analysis.source,
            status="degraded" if degraded else "success",
            provider=analysis.provider,
            attempts=analysis.attempts,
            extraction_degraded=extraction.degraded,
            cache_written=cache_written,
            error_message=analysis.error_message,
        )

    def analyze_text(self, text: str) -> TextAnalysis:
        """Analyze plain text with the provider chain, or heuristically on failure."""
        prompt = self._build_prompt(text)
        Log.debug(f"Analysis prompt:\n{prompt}")
        attempts: list[ProviderAttempt] = []
        try:
            response = self._chain.complete(prompt)
            attempts = response.attempts
            result = validate_and_build(response.payload)
        except ProviderChainExhaustedError as exc:
            Log.warning(f"Provider chain exhausted, falling back to heuristic: {exc}")
            return self._heuristic_fallback(text, exc.attempts, str(exc))
        except Exception as exc:
            Log.warning(f"AI analysis failed, falling back to heuristic: {exc}")
            return self._heuristic_fallback(text, attempts, str(exc))

        Log.info(
            f"AI analysis by {response.provider}: {len(result.key_skills)} skills, "
            f"seniority={result.seniority}"
        )
        return TextAnalysis(
            result=result,
            source="provider",
            provider=response.provider,
            attempts=attempts,
        )

    def _heuristic_fallback(
        self, text: str, attempts: list[ProviderAttempt], error_message: str
    ) -> TextAnalysis:
        return TextAnalysis(
            result=self._heuristic.analyze(text),
            source="heuristic",
            attempts=attempts,
            error_message=error_message,
        )

    def _build_prompt(self, text: str) -> str:
        clipped = text[: self._max_prompt_chars]
        return self._prompt_template.format(cv_text=clipped)
