from dataclasses import asdict, dataclass, field, replace
from typing import Literal

from cvscoring.providers.models import ProviderAttempt

SENIORITY_LEVELS = ("junior", "mid", "senior", "lead")

AnalysisSource = Literal["cache", "provider", "heuristic"]
OutcomeStatus = Literal["success", "degraded"]


@dataclass(frozen=True)
class AnalysisResult:
    """Structured CV analysis. Every field is always populated."""

    summary: str = ""
    key_skills: list[str] = field(default_factory=list)
    total_experience_years: float = 0
    seniority: str = "junior"
    top_roles: list[str] = field(default_factory=list)
    education: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    notable_projects: list[str] = field(default_factory=list)
    risks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)

    def with_risk(self, risk: str) -> "AnalysisResult":
        if risk in self.risks:
            return self
        return replace(self, risks=[*self.risks, risk])


@dataclass(frozen=True)
class AnalysisOutcome:
    """Result of one analysis request and how it was produced."""

    application_id: str
    result: AnalysisResult
    source: AnalysisSource
    status: OutcomeStatus = "success"
    provider: str | None = None
    attempts: list[ProviderAttempt] = field(default_factory=list)
    extraction_degraded: bool = False
    cache_written: bool = False
    error_message: str = ""
