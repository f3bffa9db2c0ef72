import json
from typing import Any

import psycopg

from cvscoring.database.connection import get_connection
from cvscoring.logging.logger import Log
from cvscoring.profiles.base import BaseGoldenProfileSource
from cvscoring.profiles.models import GoldenCandidateProfile


class DatabaseGoldenProfileSource(BaseGoldenProfileSource):
    """Golden profiles kept in the jobs.golden_candidate JSON column."""

    def get(self, job_id: str) -> GoldenCandidateProfile | None:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "SELECT golden_candidate FROM jobs WHERE id = %s",
                        (job_id,),
                    )
                    row = cur.fetchone()
        except (psycopg.Error, RuntimeError) as exc:
            Log.warning(f"Database lookup of golden profile for job {job_id} failed: {exc}")
            return None

        if row is None or row[0] is None:
            return None
        return _profile_from_column(row[0], job_id)


def _profile_from_column(value: Any, job_id: str) -> GoldenCandidateProfile | None:
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            Log.warning(f"Ignoring invalid golden_candidate JSON for job {job_id}")
            return None
    if not isinstance(value, dict):
        return None
    return GoldenCandidateProfile.from_dict(value)
