from cvscoring.config.settings import Settings
from cvscoring.profiles.base import BaseGoldenProfileSource
from cvscoring.profiles.chained_source import ChainedGoldenProfileSource
from cvscoring.profiles.database_source import DatabaseGoldenProfileSource
from cvscoring.profiles.storage_source import StorageGoldenProfileSource
from cvscoring.storage.base import BaseObjectStorage

SUPPORTED_SOURCES = ("database", "storage")


def configured_sources(settings: Settings) -> list[str]:
    names = [p.strip().lower() for p in settings.golden_profile_sources.split(",") if p.strip()]
    for name in names:
        if name not in SUPPORTED_SOURCES:
            raise ValueError(
                f"Unknown golden profile source '{name}'. Choose from: {list(SUPPORTED_SOURCES)}"
            )
    return names


class GoldenProfileSourceFactory:
    """Creates the golden profile lookup chain from settings."""

    @classmethod
    def create(cls, settings: Settings, storage: BaseObjectStorage) -> BaseGoldenProfileSource:
        sources: list[BaseGoldenProfileSource] = []
        for name in configured_sources(settings):
            if name == "database":
                sources.append(DatabaseGoldenProfileSource())
            else:
                sources.append(StorageGoldenProfileSource(storage, settings.storage_bucket))
        return ChainedGoldenProfileSource(sources)
