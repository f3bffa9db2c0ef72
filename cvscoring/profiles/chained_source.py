from collections.abc import Sequence

from cvscoring.profiles.base import BaseGoldenProfileSource
from cvscoring.profiles.models import GoldenCandidateProfile


class ChainedGoldenProfileSource(BaseGoldenProfileSource):
    """Returns the first profile found across sources, in order."""

    def __init__(self, sources: Sequence[BaseGoldenProfileSource]) -> None:
        self._sources = list(sources)

    def get(self, job_id: str) -> GoldenCandidateProfile | None:
        for source in self._sources:
            profile = source.get(job_id)
            if profile is not None:
                return profile
        return None
