from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from cvscoring.config.settings import Settings
from cvscoring.logging.logger import Log

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    """Libpq connection string for the recruitment database.

    Values are quoted by psycopg, so passwords with spaces or quotes survive.
    """
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=settings.db_connect_timeout_seconds,
        application_name="cvscoring",
    )


def init_pool(settings: Settings) -> None:
    """Open the shared pool used by the database golden profile source.

    Calling it again replaces the previous pool.
    """
    global _pool  # noqa: PLW0603
    if _pool is not None:
        close_pool()
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=1,
        max_size=max(1, settings.db_pool_max_size),
        name="cvscoring",
        open=True,
    )
    Log.debug(
        f"Database pool opened for {settings.db_host}:{settings.db_port}/{settings.db_database}"
    )


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Borrow a pooled connection. Caller manages commit/rollback."""
    if _pool is None:
        raise RuntimeError("Database pool is not open; golden profiles need init_pool() first")
    with _pool.connection() as conn:
        yield conn
