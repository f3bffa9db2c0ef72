import json
import math
from typing import Any

from cvscoring.analysis.models import AnalysisResult
from cvscoring.logging.logger import Log
from cvscoring.profiles.models import GoldenCandidateProfile
from cvscoring.prompts.loader import COMPATIBILITY_PROMPT, load_prompt_template
from cvscoring.providers.chain import ProviderChain
from cvscoring.scoring.exceptions import GoldenProfileMissingError
from cvscoring.scoring.heuristic import clamp_score, heuristic_compatibility
from cvscoring.scoring.models import CompatibilityScore


class CompatibilityScorer:
    """Scores an analysis against a golden profile, AI first, heuristic fallback."""

    def __init__(
        self,
        chain: ProviderChain | None = None,
        prompt_template: str | None = None,
    ) -> None:
        self._chain = chain
        self._prompt_template = (
            prompt_template
            if prompt_template is not None
            else load_prompt_template(COMPATIBILITY_PROMPT)
        )

    def score(
        self, golden: GoldenCandidateProfile | None, analysis: AnalysisResult
    ) -> CompatibilityScore:
        """Return a score in [0, 100].

        Raises:
            GoldenProfileMissingError: if *golden* is None.
        """
        if golden is None:
            raise GoldenProfileMissingError("Golden candidate profile is not set")

        ai_score = self._score_with_ai(golden, analysis)
        if ai_score is not None:
            return ai_score
        result = heuristic_compatibility(golden, analysis)
        Log.info(f"Heuristic compatibility score: {result.score}")
        return result

    def _score_with_ai(
        self, golden: GoldenCandidateProfile, analysis: AnalysisResult
    ) -> CompatibilityScore | None:
        if self._chain is None:
            return None
        prompt = self._prompt_template.format(
            golden_profile=json.dumps(golden.to_dict(), ensure_ascii=False),
            cv_analysis=json.dumps(analysis.to_dict(), ensure_ascii=False),
        )
        Log.debug(f"Compatibility prompt:\n{prompt}")
        try:
            payload = self._chain.chat_json(prompt)
        except Exception as exc:
            Log.warning(f"AI compatibility scoring failed, using heuristic: {exc}")
            return None

        raw_score = payload.get("score")
        if not _is_number(raw_score):
            Log.warning(f"AI compatibility response has no numeric score: {raw_score!r}")
            return None
        breakdown = payload.get("breakdown")
        return CompatibilityScore(
            score=clamp_score(raw_score),
            breakdown=breakdown if isinstance(breakdown, dict) else {},
            source="ai",
        )


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
