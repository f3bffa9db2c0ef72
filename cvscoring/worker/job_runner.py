from datetime import datetime, timezone

from cvscoring.logging.logger import Log
from cvscoring.worker.models import JobStatus, QueuedJob


class JobRunner:
    """Run one job, catch exceptions, and apply retry logic."""

    def __init__(self, max_attempts: int = 1) -> None:
        self._max_attempts = max(1, max_attempts)

    def run(self, job: QueuedJob) -> JobStatus:
        """Execute a single job with error handling.

        Returns the job's new status: "done", "failed", or "pending" when the
        job should be queued again.
        """
        job.attempts += 1
        job.status = "running"
        job.started_at = datetime.now(timezone.utc)
        Log.info(f"Running job {job.id} '{job.name}' (attempt {job.attempts})")
        try:
            job.func()
        except Exception as exc:
            return self._handle_failure(job, exc)
        job.status = "done"
        job.error_message = None
        job.finished_at = datetime.now(timezone.utc)
        Log.info(f"Job {job.id} '{job.name}' completed successfully")
        return job.status

    def _handle_failure(self, job: QueuedJob, exc: Exception) -> JobStatus:
        """Mark failed if at max attempts, otherwise back to pending."""
        Log.error(f"Job {job.id} '{job.name}' failed: {exc}")
        job.error_message = str(exc) or type(exc).__name__
        job.finished_at = datetime.now(timezone.utc)
        if job.attempts >= self._max_attempts:
            job.status = "failed"
            Log.error(f"Job {job.id} permanently failed after {job.attempts} attempts")
        else:
            job.status = "pending"
            Log.warning(f"Job {job.id} will be retried (attempt {job.attempts + 1})")
        return job.status
