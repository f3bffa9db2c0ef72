import json

from cvscoring.logging.logger import Log
from cvscoring.profiles.base import BaseGoldenProfileSource
from cvscoring.profiles.models import GoldenCandidateProfile
from cvscoring.storage.base import BaseObjectStorage
from cvscoring.storage.exceptions import StorageError, StorageObjectNotFoundError
from cvscoring.storage.keys import golden_profile_key


class StorageGoldenProfileSource(BaseGoldenProfileSource):
    """Golden profiles stored as jobs/{job_id}/goldenCandidate.json."""

    def __init__(self, storage: BaseObjectStorage, bucket: str) -> None:
        self._storage = storage
        self._bucket = bucket

    def get(self, job_id: str) -> GoldenCandidateProfile | None:
        key = golden_profile_key(job_id)
        try:
            raw = self._storage.download(self._bucket, key)
        except StorageObjectNotFoundError:
            return None
        except StorageError as exc:
            Log.warning(f"Failed to read golden profile for job {job_id}: {exc}")
            return None
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            Log.warning(f"Ignoring invalid golden profile at {key}: {exc}")
            return None
        if not isinstance(data, dict):
            Log.warning(f"Ignoring golden profile at {key}: not a JSON object")
            return None
        return GoldenCandidateProfile.from_dict(data)

    def save(self, job_id: str, profile: GoldenCandidateProfile) -> None:
        """Persist *profile* for *job_id*, overwriting any previous one.

        Raises:
            StorageError: if the profile cannot be written.
        """
        self._storage.upload(
            self._bucket,
            golden_profile_key(job_id),
            json.dumps(profile.to_dict(), ensure_ascii=False, indent=2).encode("utf-8"),
            content_type="application/json",
        )
