import pytest

from cvscoring.profiles.database_source import DatabaseGoldenProfileSource


@pytest.mark.integration
class TestDatabaseGoldenProfileSource:
    def test_reads_golden_candidate_column(self, seed_job_with_golden: str) -> None:
        profile = DatabaseGoldenProfileSource().get(seed_job_with_golden)

        assert profile is not None
        assert profile.role == "backend developer"
        assert profile.skill_set() == ["python", "postgresql"]

    def test_unknown_job_returns_none(self, integration_pool: None) -> None:
        assert DatabaseGoldenProfileSource().get("00000000-0000-0000-0000-000000000000") is None
