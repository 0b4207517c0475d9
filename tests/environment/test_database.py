"""Unit tests for the database version probe."""

from unittest.mock import MagicMock, patch

import pytest

from project2md.environment.database import DatabaseProbe, check_sqlalchemy_available


@pytest.fixture
def mock_sqlalchemy_unavailable():
    """Mock SQLAlchemy as unavailable."""
    with patch("importlib.util.find_spec", return_value=None):
        yield


def test_check_sqlalchemy_unavailable(mock_sqlalchemy_unavailable):
    assert check_sqlalchemy_available() is False


def test_no_url():
    assert DatabaseProbe(None).server_version() is None
    assert DatabaseProbe("").server_version() is None


def test_sqlalchemy_not_installed(mock_sqlalchemy_unavailable):
    assert DatabaseProbe("sqlite://").server_version() is None


def test_sqlite_version():
    pytest.importorskip("sqlalchemy")
    import sqlite3

    assert DatabaseProbe("sqlite://").server_version() == sqlite3.sqlite_version


def test_custom_query():
    pytest.importorskip("sqlalchemy")

    assert DatabaseProbe("sqlite://", query="select 'v1.2'").server_version() == "v1.2"


def test_null_result_is_empty_string():
    pytest.importorskip("sqlalchemy")

    assert DatabaseProbe("sqlite://", query="select null").server_version() == ""


def test_failing_query():
    pytest.importorskip("sqlalchemy")

    assert DatabaseProbe("sqlite://", query="select * from missing_table").server_version() is None


def test_invalid_url():
    pytest.importorskip("sqlalchemy")

    assert DatabaseProbe("not a url").server_version() is None
    assert DatabaseProbe("nosuchdialect://host/db").server_version() is None


def test_unreachable_server_disposes_engine():
    pytest.importorskip("sqlalchemy")
    engine = MagicMock()
    engine.dialect.name = "postgresql"
    engine.connect.side_effect = OSError("connection refused")

    with patch("sqlalchemy.create_engine", return_value=engine):
        assert DatabaseProbe("postgresql://localhost/app").server_version() is None
    engine.dispose.assert_called_once()
