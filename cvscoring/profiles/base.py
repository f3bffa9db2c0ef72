from abc import ABC, abstractmethod

from cvscoring.profiles.models import GoldenCandidateProfile


class BaseGoldenProfileSource(ABC):
    """Contract for looking up the golden candidate profile of a job."""

    @abstractmethod
    def get(self, job_id: str) -> GoldenCandidateProfile | None:
        """Return the job's golden profile, or None when none is configured."""
