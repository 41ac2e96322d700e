"""Shared fixtures: a file-backed SQLite engine standing in for MariaDB."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from db.init_db import initialize_schema
from main import create_app

SQLITE_SCHEMA = """
CREATE TABLE users (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    username        TEXT NOT NULL UNIQUE,
    email           TEXT NOT NULL UNIQUE,
    password_hash   TEXT NOT NULL
);

CREATE TABLE questions (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    qualification_id    INTEGER NOT NULL,
    topic_id            INTEGER NOT NULL,
    author_user_id      INTEGER NOT NULL REFERENCES users(id),
    question_data       TEXT NOT NULL
);
"""


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_text(SQLITE_SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


@pytest.fixture
def db_engine(engine, schema_file):
    initialize_schema(engine, schema_file)
    return engine


@pytest.fixture
def client(db_engine):
    with TestClient(create_app(db_engine)) as c:
        yield c


@pytest.fixture
def row_count():
    def _count(engine, table: str) -> int:
        with engine.connect() as conn:
            return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()
    return _count


