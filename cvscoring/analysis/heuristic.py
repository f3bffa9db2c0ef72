"""Deterministic, offline CV analyzer used when no AI provider is usable.

Processing flow:
1. Detect known skills from a fixed catalogue (catalogue order).
2. Detect years of experience ("5 years", "3+ yrs", "4 lata").
3. Infer seniority from keywords, then from years of experience.
4. Detect roles from an ordered regex table.
5. Collect education, spoken languages and project lines.
6. Build a one-sentence summary and the risk list.
"""

from __future__ import annotations

import re
from typing import ClassVar

from cvscoring.analysis.models import AnalysisResult
from cvscoring.logging.logger import Log

LIMITED_SKILLS_RISK = "Limited number of identified technical skills"
DEFAULT_ROLE = "Developer"
DEFAULT_NAME = "Candidate"


def _skill_pattern(skill: str) -> re.Pattern[str]:
    variants = [skill]
    stripped = re.sub(r"[.\-]", "", skill)
    if stripped != skill:
        variants.append(stripped)
    alternatives = "|".join(re.escape(v) for v in variants)
    return re.compile(rf"(?<![\w+#.])(?:{alternatives})(?![\w+#])")


class HeuristicAnalyzer:
    """Pattern-based extraction of skills, seniority and roles. Never fails."""

    SKILL_CATALOGUE: ClassVar[tuple[str, ...]] = (
        "javascript", "typescript", "react", "vue", "angular", "node", "express",
        "python", "django", "flask", "java", "spring", "c#", "c++", "c", "go",
        "rust", "php", "laravel", "ruby", "rails", "swift", "kotlin", "dart",
        "flutter", "html", "css", "sass", "scss", "tailwind", "bootstrap",
        "sql", "postgresql", "mysql", "mongodb", "redis", "elasticsearch",
        "docker", "kubernetes", "aws", "azure", "gcp", "heroku", "vercel",
        "git", "github", "gitlab", "jenkins", "ci/cd", "terraform",
        "graphql", "rest", "api", "microservices", "websockets",
        "next.js", "nest.js", "nuxt", "gatsby",
        "webpack", "vite", "babel", "eslint", "prettier",
        "figma", "sketch", "photoshop", "illustrator",
    )

    _SKILL_PATTERNS: ClassVar[list[tuple[str, re.Pattern[str]]]] = [
        (skill, _skill_pattern(skill)) for skill in SKILL_CATALOGUE
    ]

    _YEARS_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<!\d)(\d{1,2})\+?\s*(?:years?|yrs?|lat\w*|roku)\b",
        re.IGNORECASE,
    )

    # Checked in order; the first matching level wins.
    _SENIORITY_RULES: ClassVar[list[tuple[str, re.Pattern[str]]]] = [
        ("senior", re.compile(r"\bsenior\b|\bsr\b\.?|\bstarszy\b")),
        ("mid", re.compile(r"\bmid\b|\bmiddle\b|\bregular\b|\bspecjalista\b")),
        ("junior", re.compile(r"\bjunior\b|\bjr\b\.?|\bmłodszy\b|\bstażysta\b")),
        ("lead", re.compile(r"\blead\b|\bprincipal\b|\bstaff\b|\barchitect\b|\bkierownik\b")),
    ]

    _ROLE_RULES: ClassVar[list[tuple[re.Pattern[str], str]]] = [
        (re.compile(r"\b(?:front[- ]?end|ui|user interface)\b", re.I), "Frontend Developer"),
        (re.compile(r"\b(?:back[- ]?end|server|api)\b", re.I), "Backend Developer"),
        (re.compile(r"\bfull[- ]?stack\b", re.I), "Fullstack Developer"),
        (re.compile(r"\b(?:mobile|android|ios|react native|flutter)\b", re.I), "Mobile Developer"),
        (re.compile(r"\b(?:devops|sre|infrastructure|deployment)\b", re.I), "DevOps Engineer"),
        (re.compile(r"\b(?:data engineer(?:ing)?|big data|etl)\b", re.I), "Data Engineer"),
        (
            re.compile(r"\b(?:data scien(?:tist|ce)|machine learning|ml|ai)\b", re.I),
            "Data Scientist",
        ),
        (re.compile(r"\b(?:qa|quality assurance|tester|testing)\b", re.I), "QA Engineer"),
        (re.compile(r"\b(?:ux|user experience|product design)\b", re.I), "UX/UI Designer"),
        (re.compile(r"\b(?:project manager|pm|scrum master)\b", re.I), "Project Manager"),
    ]

    _EDUCATION_RES: ClassVar[list[re.Pattern[str]]] = [
        re.compile(
            r"\b(?:university|uniwersytet|uczelnia|college)\s+(?:of\s+)?[^,.\n]+",
            re.IGNORECASE,
        ),
        re.compile(
            r"\b(?:bachelor|master|phd|mgr|inż|dr)\b\.?\s+(?:of\s+|in\s+)?[^,.\n]+",
            re.IGNORECASE,
        ),
        re.compile(r"\b(?:computer science|informatyka|engineering|inżynieria)\b", re.IGNORECASE),
    ]

    _LANGUAGE_RES: ClassVar[list[re.Pattern[str]]] = [
        re.compile(rf"\b(?:{names})\b[: \t]*[^\n,]*", re.IGNORECASE)
        for names in (
            "english|angielski",
            "polish|polski",
            "german|niemiecki",
            "french|francuski",
            "spanish|hiszpański",
        )
    ]

    _PROJECT_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:projects?|projekt\w*|applications?|apps?|systems?|platform\w*|portal\w*)\b",
        re.IGNORECASE,
    )

    _NAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^[ \t]*([A-ZŚĆŻŹŁĄĘŃÓ][a-zśćżźłąęńó]+[ \t]+[A-ZŚĆŻŹŁĄĘŃÓ][a-zśćżźłąęńó]+)",
        re.MULTILINE,
    )

    MAX_EDUCATION: ClassVar[int] = 3
    MAX_LANGUAGES: ClassVar[int] = 5
    MAX_PROJECTS: ClassVar[int] = 3
    MIN_PROJECT_LINE: ClassVar[int] = 20
    MAX_PROJECT_LINE: ClassVar[int] = 200

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(self, text: str) -> AnalysisResult:
        """Build a fully populated AnalysisResult from plain CV text."""
        text = text or ""
        lower = text.lower()

        skills = self._detect_skills(lower)
        years = self._detect_experience_years(text)
        seniority = self._infer_seniority(lower, years)
        roles = self._detect_roles(text)
        primary_role = roles[0] if roles else DEFAULT_ROLE

        Log.info(
            f"Heuristic analysis: {len(skills)} skills, {len(roles)} roles, "
            f"{years} years, seniority={seniority}"
        )
        return AnalysisResult(
            summary=self._build_summary(text, seniority, primary_role, years, skills),
            key_skills=skills,
            total_experience_years=years,
            seniority=seniority,
            top_roles=roles or [primary_role],
            education=self._collect(self._EDUCATION_RES, text, self.MAX_EDUCATION),
            languages=self._collect(self._LANGUAGE_RES, text, self.MAX_LANGUAGES),
            notable_projects=self._detect_projects(text),
            risks=[LIMITED_SKILLS_RISK] if len(skills) < 3 else [],
        )

    # ------------------------------------------------------------------
    # Detection steps
    # ------------------------------------------------------------------

    def _detect_skills(self, lower: str) -> list[str]:
        return [skill for skill, pattern in self._SKILL_PATTERNS if pattern.search(lower)]

    def _detect_experience_years(self, text: str) -> int:
        values = [int(m.group(1)) for m in self._YEARS_RE.finditer(text)]
        in_range = [v for v in values if 1 <= v <= 30]
        return max(in_range, default=0)

    def _infer_seniority(self, lower: str, years: int) -> str:
        for level, pattern in self._SENIORITY_RULES:
            if pattern.search(lower):
                return level
        if years >= 7:
            return "senior"
        if years >= 3:
            return "mid"
        return "junior"

    def _detect_roles(self, text: str) -> list[str]:
        return [role for pattern, role in self._ROLE_RULES if pattern.search(text)]

    def _detect_projects(self, text: str) -> list[str]:
        projects: list[str] = []
        for line in text.splitlines():
            line = line.strip()
            if not self.MIN_PROJECT_LINE <= len(line) <= self.MAX_PROJECT_LINE:
                continue
            if self._PROJECT_RE.search(line):
                projects.append(line)
                if len(projects) == self.MAX_PROJECTS:
                    break
        return projects

    @staticmethod
    def _collect(patterns: list[re.Pattern[str]], text: str, limit: int) -> list[str]:
        found: list[str] = []
        for pattern in patterns:
            for match in pattern.finditer(text):
                value = match.group(0).strip()
                if value and value not in found:
                    found.append(value)
        return found[:limit]

    def _build_summary(
        self,
        text: str,
        seniority: str,
        primary_role: str,
        years: int,
        skills: list[str],
    ) -> str:
        name_match = self._NAME_RE.search(text)
        name = name_match.group(1) if name_match else DEFAULT_NAME
        summary = f"{name} - {seniority} {primary_role}"
        if years:
            summary += f" with {years} years of experience"
        if skills:
            summary += f". Key skills: {', '.join(skills[:3])}"
        return summary + "."
