from cvscoring.providers.base import BaseChatProvider
from cvscoring.providers.chain import ProviderChain
from cvscoring.providers.factory import ProviderChainFactory

__all__ = ["BaseChatProvider", "ProviderChain", "ProviderChainFactory"]
