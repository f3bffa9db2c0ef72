"""Entry points the recruitment CRUD layer calls into."""

from pathlib import Path, PurePosixPath

from cvscoring.analysis.cache import AnalysisCache
from cvscoring.analysis.exceptions import AnalysisNotFoundError, CvNotFoundError
from cvscoring.analysis.heuristic import HeuristicAnalyzer
from cvscoring.analysis.models import AnalysisOutcome, AnalysisResult
from cvscoring.analysis.orchestrator import AnalysisOrchestrator
from cvscoring.config.settings import Settings
from cvscoring.extraction.factory import ExtractorFactory
from cvscoring.logging.logger import Log
from cvscoring.profiles.base import BaseGoldenProfileSource
from cvscoring.profiles.factory import GoldenProfileSourceFactory
from cvscoring.providers.factory import ProviderChainFactory
from cvscoring.scoring.exceptions import GoldenProfileMissingError
from cvscoring.scoring.models import CompatibilityScore
from cvscoring.scoring.scorer import CompatibilityScorer
from cvscoring.storage.base import BaseObjectStorage
from cvscoring.storage.keys import ANALYSIS_FILE_NAME, application_prefix, cv_key
from cvscoring.storage.local_storage import LocalObjectStorage
from cvscoring.worker.analysis_queue import AnalysisQueue
from cvscoring.worker.job_runner import JobRunner
from cvscoring.worker.models import QueuedJob


class CvAnalysisService:
    """Facade over analysis, caching, scoring and the background queue."""

    def __init__(
        self,
        *,
        storage: BaseObjectStorage,
        bucket: str,
        orchestrator: AnalysisOrchestrator,
        cache: AnalysisCache,
        scorer: CompatibilityScorer,
        profiles: BaseGoldenProfileSource,
        queue: AnalysisQueue,
    ) -> None:
        self._storage = storage
        self._bucket = bucket
        self._orchestrator = orchestrator
        self._cache = cache
        self._scorer = scorer
        self._profiles = profiles
        self._queue = queue

    @property
    def queue(self) -> AnalysisQueue:
        return self._queue

    def analyze(
        self,
        application_id: str,
        file_bytes: bytes,
        file_name: str,
        force_refresh: bool = False,
    ) -> AnalysisResult:
        """Analyze an in-memory CV. Never fails for provider or extraction errors."""
        return self._orchestrator.analyze(application_id, file_bytes, file_name, force_refresh)

    def analyze_stored(self, application_id: str, force_refresh: bool = False) -> AnalysisOutcome:
        """Analyze the newest CV stored for the application.

        Raises:
            CvNotFoundError: if no CV is stored and no cached analysis can be used.
        """
        cached = self._orchestrator.lookup_cached(application_id, force_refresh)
        if cached is not None:
            return cached
        key = self._latest_cv_key(application_id)
        if key is None:
            raise CvNotFoundError(f"CV not found in storage for application {application_id}")
        file_bytes = self._storage.download(self._bucket, key)
        return self._orchestrator.compute(application_id, file_bytes, key.rsplit("/", 1)[-1])

    def compatibility(self, job_id: str, application_id: str) -> CompatibilityScore:
        """Score an application's cached analysis against the job's golden profile.

        Raises:
            GoldenProfileMissingError: if the job has no golden profile.
            AnalysisNotFoundError: if the application has not been analyzed yet.
        """
        golden = self._profiles.get(job_id)
        if golden is None:
            raise GoldenProfileMissingError(f"Golden candidate not set for job {job_id}")
        analysis = self._cache.read(application_id)
        if analysis is None:
            raise AnalysisNotFoundError(f"CV analysis not found for application {application_id}")
        return self._scorer.score(golden, analysis)

    def submit_cv(self, application_id: str, file_name: str, data: bytes) -> QueuedJob:
        """Store an uploaded CV and queue its analysis.

        Raises:
            StorageError: if the CV cannot be stored.
        """
        file_name = PurePosixPath(file_name).name
        self._storage.upload(self._bucket, cv_key(application_id, file_name), data)
        Log.info(f"Stored CV '{file_name}' for application {application_id}")
        return self.enqueue_analysis(application_id, force_refresh=True)

    def enqueue_analysis(self, application_id: str, force_refresh: bool = False) -> QueuedJob:
        return self._queue.enqueue(
            lambda: self.analyze_stored(application_id, force_refresh),
            name=f"analyze:{application_id}",
        )

    def _latest_cv_key(self, application_id: str) -> str | None:
        keys = self._storage.list_keys(self._bucket, application_prefix(application_id))
        for key in keys:
            if not key.endswith(f"/{ANALYSIS_FILE_NAME}"):
                return key
        return None


def build_service(
    settings: Settings,
    storage: BaseObjectStorage | None = None,
) -> CvAnalysisService:
    """Build a CvAnalysisService with all required adapters."""
    if storage is None:
        storage = LocalObjectStorage(Path(settings.storage_root))
    cache = AnalysisCache(storage, settings.storage_bucket)
    chain = ProviderChainFactory.create(settings)
    orchestrator = AnalysisOrchestrator(
        extractor=ExtractorFactory.create(settings),
        chain=chain,
        heuristic=HeuristicAnalyzer(),
        cache=cache,
        max_prompt_chars=settings.ai_max_prompt_chars,
    )
    queue = AnalysisQueue(
        JobRunner(settings.analysis_queue_max_attempts),
        failed_history=settings.analysis_queue_failed_history,
    )
    return CvAnalysisService(
        storage=storage,
        bucket=settings.storage_bucket,
        orchestrator=orchestrator,
        cache=cache,
        scorer=CompatibilityScorer(chain),
        profiles=GoldenProfileSourceFactory.create(settings, storage),
        queue=queue,
    )
