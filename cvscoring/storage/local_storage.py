import os
from pathlib import Path

from cvscoring.storage.base import BaseObjectStorage
from cvscoring.storage.exceptions import StorageError, StorageObjectNotFoundError


class LocalObjectStorage(BaseObjectStorage):
    """Object storage on the local filesystem: {root}/{bucket}/{key}."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    def download(self, bucket: str, key: str) -> bytes:
        path = self._resolve_path(bucket, key)
        if not path.is_file():
            raise StorageObjectNotFoundError(f"Object not found: {bucket}/{key}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read {bucket}/{key}: {exc}") from exc

    def upload(
        self,
        bucket: str,
        key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        _ = content_type
        path = self._resolve_path(bucket, key)
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, path)
        except OSError as exc:
            raise StorageError(f"Failed to write {bucket}/{key}: {exc}") from exc

    def list_keys(self, bucket: str, prefix: str) -> list[str]:
        directory = self._resolve_path(bucket, prefix)
        if not directory.is_dir():
            return []
        files = [
            p for p in directory.iterdir() if p.is_file() and not p.name.startswith(".")
        ]
        files.sort(key=lambda p: (p.stat().st_mtime, p.name), reverse=True)
        base = prefix.strip("/")
        return [f"{base}/{p.name}" for p in files]

    def _resolve_path(self, bucket: str, key: str) -> Path:
        bucket_root = (self._root / bucket).resolve()
        path = (bucket_root / key.strip("/")).resolve()
        if path != bucket_root and bucket_root not in path.parents:
            raise StorageError(f"Key escapes bucket: {bucket}/{key}")
        return path
