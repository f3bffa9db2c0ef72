import json

from cvscoring.analysis.exceptions import AnalysisValidationError
from cvscoring.analysis.models import AnalysisResult
from cvscoring.analysis.validator import validate_and_build
from cvscoring.logging.logger import Log
from cvscoring.storage.base import BaseObjectStorage
from cvscoring.storage.exceptions import StorageError, StorageObjectNotFoundError
from cvscoring.storage.keys import analysis_key


class AnalysisCache:
    """Stores the last computed analysis per application as a JSON document.

    A missing or unreadable entry is a cache miss, never an error.
    Writes overwrite the previous value (last write wins).
    """

    def __init__(self, storage: BaseObjectStorage, bucket: str) -> None:
        self._storage = storage
        self._bucket = bucket

    def read(self, application_id: str, force_refresh: bool = False) -> AnalysisResult | None:
        if force_refresh:
            Log.debug(f"Cache bypassed for application {application_id}")
            return None
        key = analysis_key(application_id)
        try:
            raw = self._storage.download(self._bucket, key)
        except StorageObjectNotFoundError:
            Log.debug(f"No cached analysis for application {application_id}")
            return None
        except StorageError as exc:
            Log.warning(f"Cache read failed for application {application_id}: {exc}")
            return None

        try:
            return validate_and_build(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, AnalysisValidationError) as exc:
            Log.warning(f"Ignoring invalid cached analysis at {key}: {exc}")
            return None

    def write(self, application_id: str, result: AnalysisResult) -> bool:
        """Persist *result*. Returns False when the storage write failed."""
        payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
        try:
            self._storage.upload(
                self._bucket,
                analysis_key(application_id),
                payload.encode("utf-8"),
                content_type="application/json",
            )
        except StorageError as exc:
            Log.error(f"Failed to cache analysis for application {application_id}: {exc}")
            return False
        Log.info(f"Cached analysis for application {application_id}")
        return True
