"""Example chat provider.

Use this module as a reference when implementing new providers.
Implement BaseChatProvider and register the provider in ProviderChainFactory.
"""

import json
from typing import Any, ClassVar

from cvscoring.providers.base import BaseChatProvider


class ExampleChatProvider(BaseChatProvider):
    """Returns a fixed, valid analysis JSON without any network call.

    Useful for local development and tests. The response also carries a
    compatibility ``score`` so both prompts are answered.
    """

    name = "example"

    DEFAULT_RESPONSE: ClassVar[dict[str, Any]] = {
        "summary": "Example candidate - mid Backend Developer.",
        "key_skills": ["python", "django", "postgresql"],
        "total_experience_years": 4,
        "seniority": "mid",
        "top_roles": ["Backend Developer"],
        "education": [],
        "languages": [],
        "notable_projects": [],
        "risks": [],
        "score": 50,
        "breakdown": {"notes": "example provider"},
    }

    def __init__(self, response: dict[str, Any] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def chat(self, *, system_prompt: str, user_prompt: str) -> str:
        _ = system_prompt, user_prompt
        return json.dumps(self._response)
