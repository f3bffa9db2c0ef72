import json
from unittest.mock import MagicMock

from cvscoring.analysis.cache import AnalysisCache
from cvscoring.analysis.models import AnalysisResult
from cvscoring.storage.exceptions import StorageError
from cvscoring.storage.local_storage import LocalObjectStorage


def _result() -> AnalysisResult:
    return AnalysisResult(
        summary="Zofia Wiśniewska - mid Backend Developer.",
        key_skills=["python", "django"],
        total_experience_years=4,
        seniority="mid",
        top_roles=["Backend Developer"],
    )


class TestAnalysisCache:
    def test_miss_returns_none(self, storage: LocalObjectStorage) -> None:
        assert AnalysisCache(storage, "cvs").read("1") is None

    def test_write_then_read(self, storage: LocalObjectStorage) -> None:
        cache = AnalysisCache(storage, "cvs")
        assert cache.write("1", _result()) is True
        assert cache.read("1") == _result()

    def test_force_refresh_skips_read(self, storage: LocalObjectStorage) -> None:
        cache = AnalysisCache(storage, "cvs")
        cache.write("1", _result())
        assert cache.read("1", force_refresh=True) is None

    def test_written_json_is_readable_utf8(self, storage: LocalObjectStorage) -> None:
        AnalysisCache(storage, "cvs").write("1", _result())
        raw = storage.download("cvs", "applications/1/analysis.json").decode("utf-8")
        assert "Wiśniewska" in raw
        assert json.loads(raw)["seniority"] == "mid"

    def test_last_write_wins(self, storage: LocalObjectStorage) -> None:
        cache = AnalysisCache(storage, "cvs")
        cache.write("1", _result())
        cache.write("1", AnalysisResult(summary="second", seniority="senior"))
        cached = cache.read("1")
        assert cached is not None
        assert cached.summary == "second"

    def test_invalid_json_is_a_miss(self, storage: LocalObjectStorage) -> None:
        storage.upload("cvs", "applications/1/analysis.json", b"{not json")
        assert AnalysisCache(storage, "cvs").read("1") is None

    def test_invalid_shape_is_a_miss(self, storage: LocalObjectStorage) -> None:
        storage.upload("cvs", "applications/1/analysis.json", b'{"summary": "x"}')
        assert AnalysisCache(storage, "cvs").read("1") is None

    def test_storage_error_on_read_is_a_miss(self) -> None:
        mock_storage = MagicMock()
        mock_storage.download.side_effect = StorageError("disk gone")
        assert AnalysisCache(mock_storage, "cvs").read("1") is None

    def test_storage_error_on_write_returns_false(self) -> None:
        mock_storage = MagicMock()
        mock_storage.upload.side_effect = StorageError("read-only")
        assert AnalysisCache(mock_storage, "cvs").write("1", _result()) is False

    def test_write_uses_json_content_type(self) -> None:
        mock_storage = MagicMock()
        AnalysisCache(mock_storage, "cvs").write("1", _result())
        args, kwargs = mock_storage.upload.call_args
        assert args[:2] == ("cvs", "applications/1/analysis.json")
        assert kwargs["content_type"] == "application/json"
