"""Fixtures for CLI tests."""

from contextlib import contextmanager
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from tymora.database.models.base import Base
from tymora.database.models import bags  # noqa: F401


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary SQLite database for CLI tests."""
    db_path = tmp_path / "test_cli.db"
    db_url = f"sqlite:///{db_path}"

    engine = create_engine(db_url)

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    # Create a session factory for this test database
    TestSessionLocal = sessionmaker(bind=engine)

    @contextmanager
    def mock_get_db_session():
        """Mock get_db_session that uses the test database."""
        session = TestSessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    yield engine, mock_get_db_session

    engine.dispose()


@pytest.fixture
def cli_db(temp_db):
    """Point every CLI command at the temporary database."""
    engine, mock_get_db_session = temp_db
    with (
        patch("tymora.cli.main.init_db"),
        patch("tymora.cli.commands.bag.get_db_session", mock_get_db_session),
        patch("tymora.cli.commands.dice.get_db_session", mock_get_db_session),
    ):
        yield engine
