from cvscoring.providers.models import ProviderAttempt


class ProviderError(Exception):
    """Base exception for text-generation provider failures."""


class ProviderUnavailableError(ProviderError):
    """Raised when a provider call fails on transport, auth or a non-2xx status."""


class MalformedProviderResponseError(ProviderError):
    """Raised when a provider response is not a JSON object."""


class ProviderChainExhaustedError(ProviderError):
    """Raised when every configured provider failed.

    ``first_error`` is the failure of the highest-priority provider, or None
    when no provider is configured at all.
    """

    def __init__(
        self,
        message: str,
        attempts: list[ProviderAttempt],
        first_error: ProviderError | None = None,
    ) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.first_error = first_error
