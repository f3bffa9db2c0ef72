from dataclasses import asdict, dataclass
from typing import Any


def parse_skills(raw: str | None) -> list[str]:
    """Split a comma-separated skill list, lower-cased and trimmed, without duplicates."""
    skills: list[str] = []
    for part in (raw or "").split(","):
        skill = part.strip().lower()
        if skill and skill not in skills:
            skills.append(skill)
    return skills


@dataclass(frozen=True)
class GoldenCandidateProfile:
    """Recruiter-authored description of the ideal candidate for a job."""

    role: str | None = None
    level: str | None = None
    skills: str | None = None
    summary: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GoldenCandidateProfile":
        """Build a profile from stored JSON, ignoring unknown keys.

        ``skills`` may be stored either as a comma-separated string or a list.
        """
        skills = data.get("skills")
        if isinstance(skills, list):
            skills = ", ".join(str(s) for s in skills)
        return cls(
            role=_optional_str(data.get("role")),
            level=_optional_str(data.get("level")),
            skills=_optional_str(skills),
            summary=_optional_str(data.get("summary")),
        )

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)

    def skill_set(self) -> list[str]:
        return parse_skills(self.skills)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
