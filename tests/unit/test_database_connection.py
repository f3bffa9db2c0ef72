from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from psycopg.conninfo import conninfo_to_dict

from cvscoring.config.settings import Settings
from cvscoring.database import connection
from cvscoring.database.connection import (
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)


@pytest.fixture(autouse=True)
def reset_pool() -> Generator[None, None, None]:
    connection._pool = None
    yield
    connection._pool = None


class TestBuildConninfo:
    def test_maps_settings(self) -> None:
        settings = Settings(db_host="db", db_port=6543, db_database="hr", db_username="app")
        params = conninfo_to_dict(build_conninfo(settings))
        assert params["host"] == "db"
        assert params["port"] == "6543"
        assert params["dbname"] == "hr"
        assert params["user"] == "app"
        assert params["application_name"] == "cvscoring"

    def test_password_with_spaces_and_quotes(self) -> None:
        settings = Settings(db_password="it's a secret")
        assert conninfo_to_dict(build_conninfo(settings))["password"] == "it's a secret"


class TestPoolLifecycle:
    @patch("cvscoring.database.connection.ConnectionPool")
    def test_init_uses_configured_size(self, mock_pool_cls: MagicMock) -> None:
        init_pool(Settings(db_database="recruitment", db_pool_max_size=3))

        args, kwargs = mock_pool_cls.call_args
        assert conninfo_to_dict(args[0])["dbname"] == "recruitment"
        assert kwargs["max_size"] == 3
        assert kwargs["min_size"] == 1

    @patch("cvscoring.database.connection.ConnectionPool")
    def test_reinit_closes_previous_pool(self, mock_pool_cls: MagicMock) -> None:
        first, second = MagicMock(), MagicMock()
        mock_pool_cls.side_effect = [first, second]

        init_pool(Settings())
        init_pool(Settings())

        first.close.assert_called_once()
        assert connection._pool is second

    @patch("cvscoring.database.connection.ConnectionPool")
    def test_close_resets_pool(self, mock_pool_cls: MagicMock) -> None:
        init_pool(Settings())
        close_pool()

        mock_pool_cls.return_value.close.assert_called_once()
        with pytest.raises(RuntimeError, match="not open"):
            with get_connection():
                pass

    def test_close_without_pool_is_noop(self) -> None:
        close_pool()
        assert connection._pool is None

    @patch("cvscoring.database.connection.ConnectionPool")
    def test_get_connection_borrows_from_pool(self, mock_pool_cls: MagicMock) -> None:
        conn = MagicMock()
        mock_pool_cls.return_value.connection.return_value.__enter__.return_value = conn
        init_pool(Settings())

        with get_connection() as borrowed:
            assert borrowed is conn
