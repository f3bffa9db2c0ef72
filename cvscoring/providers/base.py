from abc import ABC, abstractmethod


class BaseChatProvider(ABC):
    """Contract for text-generation backends used by the provider chain."""

    name: str = "provider"

    @abstractmethod
    def chat(self, *, system_prompt: str, user_prompt: str) -> str:
        """Send one chat exchange and return the raw response text.

        Raises:
            ProviderUnavailableError: on network, auth or non-2xx failures.
            MalformedProviderResponseError: when the response carries no content.
        """
