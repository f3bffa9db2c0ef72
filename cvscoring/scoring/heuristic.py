"""Deterministic weighted compatibility score.

skills 60 (share of golden skills present), level 20 (exact seniority match),
role 20 (golden role among the candidate's top roles).
"""

import math

from cvscoring.analysis.models import AnalysisResult
from cvscoring.profiles.models import GoldenCandidateProfile
from cvscoring.scoring.models import CompatibilityScore

SKILLS_WEIGHT = 60
LEVEL_WEIGHT = 20
ROLE_WEIGHT = 20


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def heuristic_compatibility(
    golden: GoldenCandidateProfile, analysis: AnalysisResult
) -> CompatibilityScore:
    golden_skills = golden.skill_set()
    candidate_skills = {skill.lower() for skill in analysis.key_skills}
    intersection = sum(1 for skill in golden_skills if skill in candidate_skills)
    skills_score = (
        round_half_up(intersection / len(golden_skills) * SKILLS_WEIGHT) if golden_skills else 0
    )

    golden_level = (golden.level or "").strip().lower()
    level_score = (
        LEVEL_WEIGHT if golden_level and golden_level == analysis.seniority.lower() else 0
    )

    golden_role = (golden.role or "").strip().lower()
    candidate_roles = [role.lower() for role in analysis.top_roles]
    role_score = ROLE_WEIGHT if golden_role and golden_role in candidate_roles else 0

    return CompatibilityScore(
        score=clamp_score(skills_score + level_score + role_score),
        breakdown={
            "skills": {"value": skills_score, "weight": SKILLS_WEIGHT},
            "level": {"value": level_score, "weight": LEVEL_WEIGHT},
            "role": {"value": role_score, "weight": ROLE_WEIGHT},
            "intersection": intersection,
            "golden_skills": golden_skills,
        },
        source="heuristic",
    )
