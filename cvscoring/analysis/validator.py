"""Validates provider or cached JSON and builds an AnalysisResult.

Unknown keys are dropped and loose shapes are repaired (a single string where
a list is expected, numeric strings for years). Payloads missing the core
fields or carrying an unknown seniority are rejected.
"""

import math
from typing import Any

from cvscoring.analysis.exceptions import AnalysisValidationError
from cvscoring.analysis.models import SENIORITY_LEVELS, AnalysisResult

_REQUIRED_FIELDS = ("summary", "key_skills", "seniority")
_LIST_FIELDS = (
    "top_roles",
    "education",
    "languages",
    "notable_projects",
    "risks",
)
_SENIORITY_ALIASES = {
    "regular": "mid",
    "middle": "mid",
    "medior": "mid",
    "intermediate": "mid",
    "principal": "lead",
    "staff": "lead",
    "architect": "lead",
    "intern": "junior",
    "trainee": "junior",
}


def validate_and_build(data: Any) -> AnalysisResult:
    """Validate a parsed JSON payload and build an AnalysisResult.

    Raises:
        AnalysisValidationError: when the payload cannot be repaired.
    """
    if not isinstance(data, dict):
        raise AnalysisValidationError("Analysis payload must be an object")
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise AnalysisValidationError(f"Missing required field: {name}")

    lists = {name: _build_string_list(data.get(name), name) for name in _LIST_FIELDS}
    return AnalysisResult(
        summary=_build_summary(data["summary"]),
        key_skills=_dedupe(_build_string_list(data["key_skills"], "key_skills")),
        total_experience_years=_build_years(data.get("total_experience_years")),
        seniority=_build_seniority(data["seniority"]),
        **lists,
    )


def _build_summary(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise AnalysisValidationError("'summary' must be a string")
    return raw.strip()


def _build_string_list(raw: Any, name: str) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{name}' must be a list of strings")
    items: list[str] = []
    for item in raw:
        if isinstance(item, bool) or not isinstance(item, (str, int, float)):
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            unique.append(item)
    return unique


def _build_years(raw: Any) -> float:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise AnalysisValidationError("'total_experience_years' must be a number")
    if isinstance(raw, str):
        try:
            raw = float(raw.strip())
        except ValueError as exc:
            raise AnalysisValidationError(
                "'total_experience_years' must be a number"
            ) from exc
    if not isinstance(raw, (int, float)) or not math.isfinite(raw):
        raise AnalysisValidationError("'total_experience_years' must be a number")
    if raw < 0:
        return 0
    return int(raw) if float(raw).is_integer() else float(raw)


def _build_seniority(raw: Any) -> str:
    if not isinstance(raw, str):
        raise AnalysisValidationError("'seniority' must be a string")
    value = raw.strip().lower()
    value = _SENIORITY_ALIASES.get(value, value)
    if value not in SENIORITY_LEVELS:
        raise AnalysisValidationError(
            f"'seniority' must be one of {list(SENIORITY_LEVELS)}, got {raw!r}"
        )
    return value
