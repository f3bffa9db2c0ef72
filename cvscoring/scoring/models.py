from dataclasses import dataclass, field
from typing import Any, Literal

ScoreSource = Literal["ai", "heuristic"]


@dataclass(frozen=True)
class CompatibilityScore:
    """Candidate-to-golden-profile match, 0-100."""

    score: int
    breakdown: dict[str, Any] = field(default_factory=dict)
    source: ScoreSource = "heuristic"

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "breakdown": self.breakdown, "source": self.source}
