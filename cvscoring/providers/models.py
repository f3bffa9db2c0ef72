from dataclasses import dataclass, field
from typing import Any, Literal

AttemptStatus = Literal["success", "failed"]


@dataclass(frozen=True)
class ProviderAttempt:
    """Outcome of one provider call inside the chain."""

    provider: str
    status: AttemptStatus
    error_message: str = ""


@dataclass(frozen=True)
class ChainResponse:
    """Parsed JSON object returned by the first provider that succeeded."""

    payload: dict[str, Any]
    provider: str
    attempts: list[ProviderAttempt] = field(default_factory=list)
