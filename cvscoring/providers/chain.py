from collections.abc import Sequence
from typing import Any

from cvscoring.logging.logger import Log
from cvscoring.providers.base import BaseChatProvider
from cvscoring.providers.exceptions import (
    ProviderChainExhaustedError,
    ProviderError,
    ProviderUnavailableError,
)
from cvscoring.providers.json_parser import parse_json_object
from cvscoring.providers.models import ChainResponse, ProviderAttempt

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant. Always reply with strict JSON only."


class ProviderChain:
    """Tries chat providers in priority order until one returns a JSON object.

    A failing provider is never retried; the chain moves on to the next one.
    """

    def __init__(
        self,
        providers: Sequence[BaseChatProvider],
        *,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._providers = list(providers)
        self._system_prompt = system_prompt

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self._providers]

    def chat_json(self, prompt: str) -> dict[str, Any]:
        """Return the parsed JSON object from the first provider that succeeds."""
        return self.complete(prompt).payload

    def complete(self, prompt: str) -> ChainResponse:
        """Run the chain and return the payload with the attempt history.

        Raises:
            ProviderChainExhaustedError: when every provider failed.
        """
        attempts: list[ProviderAttempt] = []
        first_error: ProviderError | None = None

        for provider in self._providers:
            try:
                raw = provider.chat(system_prompt=self._system_prompt, user_prompt=prompt)
                Log.debug(f"Provider {provider.name} raw response:\n{raw}")
                payload = parse_json_object(raw)
            except ProviderError as exc:
                Log.warning(f"Provider {provider.name} failed: {exc}")
                attempts.append(ProviderAttempt(provider.name, "failed", str(exc)))
                if first_error is None:
                    first_error = exc
                continue
            except Exception as exc:
                Log.exception(f"Provider {provider.name} crashed: {exc}")
                error = ProviderUnavailableError(f"{provider.name} unexpected error: {exc}")
                error.__cause__ = exc
                attempts.append(ProviderAttempt(provider.name, "failed", str(error)))
                if first_error is None:
                    first_error = error
                continue

            attempts.append(ProviderAttempt(provider.name, "success"))
            Log.info(f"Provider {provider.name} returned {len(payload)} keys")
            return ChainResponse(payload=payload, provider=provider.name, attempts=attempts)

        if first_error is None:
            raise ProviderChainExhaustedError("No AI provider configured", attempts)
        raise ProviderChainExhaustedError(
            f"All {len(attempts)} providers failed, first error: {first_error}",
            attempts,
            first_error,
        ) from first_error
