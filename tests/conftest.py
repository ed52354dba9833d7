"""Shared test fixtures."""

import pytest
from sqlalchemy import text

from config.database import create_db_engine, drop_db, init_db
from taskrepo.repository import TaskRepository


@pytest.fixture(scope="session")
def database_url(tmp_path_factory):
    """Ephemeral SQLite database with the tasks schema, dropped after the run."""
    db_path = tmp_path_factory.mktemp("db") / "tasks_test.db"
    url = f"sqlite:///{db_path}"
    engine = create_db_engine(url)
    init_db(engine)
    yield url
    drop_db(engine)
    engine.dispose()


@pytest.fixture()
def repo(database_url):
    """Repository on an empty table."""
    repository = TaskRepository(database_url)
    repository.clear()
    yield repository
    repository.close()


@pytest.fixture()
def insert_row(repo):
    """Insert a raw row, bypassing the repository mapping."""

    def _insert(id, name, created_on, description=None, closed_on=None):
        with repo.engine.begin() as conn:
            conn.execute(
                text(
                    'INSERT INTO "TASKS" ("Id", "Name", "Description", "CreatedOn", "ClosedOn") '
                    "VALUES (:id, :name, :description, :created_on, :closed_on)"
                ),
                {
                    "id": id,
                    "name": name,
                    "description": description,
                    "created_on": created_on,
                    "closed_on": closed_on,
                },
            )

    return _insert
