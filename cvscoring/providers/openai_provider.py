import httpx
import openai

from cvscoring.providers.base import BaseChatProvider
from cvscoring.providers.exceptions import (
    MalformedProviderResponseError,
    ProviderUnavailableError,
)


class OpenAIChatProvider(BaseChatProvider):
    """Chat provider built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        name: str,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        temperature: float = 0.2,
    ) -> None:
        self.name = name
        self._model = model
        self._temperature = temperature
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def chat(self, *, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ProviderUnavailableError(
                f"{self.name} network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ProviderUnavailableError(
                f"{self.name} API error: {exc}"
            ) from exc

        if not response.choices:
            raise MalformedProviderResponseError(f"{self.name} returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise MalformedProviderResponseError(f"{self.name} returned empty response")
        return content
