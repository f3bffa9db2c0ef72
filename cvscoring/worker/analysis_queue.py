import itertools
import queue
import threading
from collections import deque
from collections.abc import Callable
from types import TracebackType

from cvscoring.logging.logger import Log
from cvscoring.worker.job_runner import JobRunner
from cvscoring.worker.models import QueuedJob

_STOP = object()


class AnalysisQueue:
    """In-process FIFO job queue with exactly one consumer thread.

    A job runs to completion before the next one starts. Failures never stop
    the queue; they are recorded on the job and in ``failed_jobs``.
    """

    def __init__(
        self,
        job_runner: JobRunner | None = None,
        *,
        failed_history: int = 100,
        name: str = "analysis-queue",
    ) -> None:
        self._job_runner = job_runner if job_runner is not None else JobRunner()
        self._name = name
        self._queue: queue.Queue[object] = queue.Queue()
        self._ids = itertools.count(1)
        self._cond = threading.Condition()
        self._outstanding = 0
        self._completed = 0
        self._failed = 0
        self._failed_jobs: deque[QueuedJob] = deque(maxlen=max(1, failed_history))
        self._thread: threading.Thread | None = None
        self._stopping = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start the consumer thread. Jobs enqueued earlier run in order."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run_loop, name=self._name, daemon=True)
        self._thread.start()
        Log.info(f"Queue '{self._name}' started")

    def stop(self, wait: bool = True) -> None:
        """Stop accepting jobs; the worker drains queued jobs before exiting."""
        with self._cond:
            if self._stopping:
                return
            self._stopping = True
            self._queue.put(_STOP)
        if wait and self._thread is not None:
            self._thread.join()
        Log.info(f"Queue '{self._name}' stopped")

    def __enter__(self) -> "AnalysisQueue":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def enqueue(self, func: Callable[[], object], name: str = "") -> QueuedJob:
        """Add a job to the tail of the queue.

        Raises:
            RuntimeError: if the queue has been stopped.
        """
        with self._cond:
            if self._stopping:
                raise RuntimeError(f"Queue '{self._name}' is stopped")
            job_id = next(self._ids)
            job = QueuedJob(id=job_id, name=name or f"job-{job_id}", func=func)
            self._outstanding += 1
            self._queue.put(job)
        Log.debug(f"Enqueued job {job.id} '{job.name}'")
        return job

    def join(self, timeout: float | None = None) -> bool:
        """Block until every enqueued job finished. Returns False on timeout.

        Requires a started queue.
        """
        with self._cond:
            return self._cond.wait_for(lambda: self._outstanding == 0, timeout=timeout)

    def size(self) -> int:
        """Number of jobs waiting or running."""
        with self._cond:
            return self._outstanding

    @property
    def completed_count(self) -> int:
        with self._cond:
            return self._completed

    @property
    def failed_count(self) -> int:
        with self._cond:
            return self._failed

    @property
    def failed_jobs(self) -> list[QueuedJob]:
        """Most recent permanently failed jobs, oldest first."""
        with self._cond:
            return list(self._failed_jobs)

    # ------------------------------------------------------------------
    # Worker loop
    # ------------------------------------------------------------------

    def _run_loop(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                break
            if not isinstance(item, QueuedJob):
                continue
            status = self._job_runner.run(item)
            if status == "pending" and self._requeue(item):
                continue
            if status == "pending":
                item.status = "failed"
            self._finish(item)

    def _requeue(self, job: QueuedJob) -> bool:
        # Puts happen under _cond so a retry never lands behind _STOP.
        with self._cond:
            if self._stopping:
                return False
            self._queue.put(job)
            return True

    def _finish(self, job: QueuedJob) -> None:
        with self._cond:
            if job.status == "failed":
                self._failed += 1
                self._failed_jobs.append(job)
            else:
                self._completed += 1
            self._outstanding -= 1
            self._cond.notify_all()
