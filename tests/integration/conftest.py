import json
import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from cvscoring.config.settings import Settings
from cvscoring.database.connection import (
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "recruitment_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings)):
            pass
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def seed_job_with_golden(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    """Insert a job row carrying a golden_candidate JSON value; removed afterwards."""
    job_id = str(uuid.uuid4())
    golden = {"role": "backend developer", "level": "senior", "skills": "python, postgresql"}
    try:
        with db_conn.cursor() as cur:
            cur.execute(
                "INSERT INTO jobs (id, golden_candidate) VALUES (%s, %s)",
                (job_id, json.dumps(golden)),
            )
        db_conn.commit()
    except psycopg.Error as e:
        db_conn.rollback()
        pytest.skip(f"jobs table not usable for integration test setup: {e}")
    try:
        yield job_id
    finally:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM jobs WHERE id = %s", (job_id,))
        db_conn.commit()
