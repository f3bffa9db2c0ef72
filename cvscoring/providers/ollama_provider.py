import httpx

from cvscoring.providers.base import BaseChatProvider
from cvscoring.providers.exceptions import (
    MalformedProviderResponseError,
    ProviderUnavailableError,
)


class OllamaChatProvider(BaseChatProvider):
    """Chat provider for a self-hosted Ollama server (native /api/chat)."""

    name = "ollama"

    def __init__(
        self,
        *,
        host: str,
        model: str,
        timeout_seconds: int,
        temperature: float = 0.2,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._client = httpx.Client(
            base_url=host.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    def chat(self, *, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self._client.post(
                "/api/chat",
                json={
                    "model": self._model,
                    "messages": [
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                    "stream": False,
                    "format": "json",
                    "options": {"temperature": self._temperature},
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ProviderUnavailableError(
                f"ollama error {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderUnavailableError(f"ollama network error: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedProviderResponseError(
                f"ollama returned a non-JSON envelope: {exc}"
            ) from exc
        message = body.get("message") if isinstance(body, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not content:
            raise MalformedProviderResponseError("ollama returned empty response")
        return str(content)

    def close(self) -> None:
        self._client.close()
