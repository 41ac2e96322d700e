"""Tests for the schema bootstrap in db/init_db.py."""

import logging

import pytest

from db.init_db import SchemaFileError, initialize_schema, split_statements


class TestSplitStatements:

    def test_trims_and_drops_empty_pieces(self):
        sql = "CREATE TABLE a (x INT);\n\n  ;\nCREATE TABLE b (y INT);\n"
        assert split_statements(sql) == ["CREATE TABLE a (x INT)", "CREATE TABLE b (y INT)"]

    def test_statement_without_terminator_is_kept(self):
        assert split_statements("SELECT 1") == ["SELECT 1"]

    def test_blank_script_yields_nothing(self):
        assert split_statements(" \n;;\t") == []

    def test_semicolon_inside_literal_is_split(self):
        # Known limitation of the naive split.
        assert split_statements("INSERT INTO t VALUES ('a;b')") == [
            "INSERT INTO t VALUES ('a",
            "b')",
        ]


class TestInitializeSchema:

    def test_fresh_database(self, engine, schema_file, row_count):
        result = initialize_schema(engine, schema_file)

        assert result.executed == 2
        assert result.failed == 0
        assert row_count(engine, "users") == 0
        assert row_count(engine, "questions") == 0

    def test_second_run_is_not_fatal(self, engine, schema_file, caplog):
        first = initialize_schema(engine, schema_file)

        with caplog.at_level(logging.WARNING):
            second = initialize_schema(engine, schema_file)

        assert second.executed <= first.executed
        assert second.executed == 0
        assert second.failed == 2
        assert all("already exists" in msg for msg in second.messages)
        assert "No SQL statements were successfully executed." in caplog.text

    def test_bad_statement_is_skipped(self, engine, tmp_path, row_count):
        path = tmp_path / "schema.sql"
        path.write_text(
            "CREATE TABL broken (x INT);\nCREATE TABLE good (x INTEGER);\n",
            encoding="utf-8",
        )

        result = initialize_schema(engine, path)

        assert result.executed == 1
        assert result.failed == 1
        assert result.failures[0].statement == "CREATE TABL broken (x INT)"
        assert row_count(engine, "good") == 0

    def test_failure_preview_is_truncated(self, engine, tmp_path, caplog):
        statement = "CREATE TABL " + "x" * 100
        path = tmp_path / "schema.sql"
        path.write_text(statement + ";", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            result = initialize_schema(engine, path)

        assert result.failures[0].preview == statement[:50]
        assert f"[{statement[:50]}...]" in caplog.text
        assert statement not in caplog.text

    def test_unreadable_file_raises(self, engine, tmp_path):
        with pytest.raises(SchemaFileError):
            initialize_schema(engine, tmp_path / "missing.sql")

    def test_repository_schema_file_splits_into_ddl(self):
        from pathlib import Path

        schema = Path(__file__).resolve().parents[1] / "schema.sql"
        statements = split_statements(schema.read_text(encoding="utf-8"))

        assert len(statements) == 4
        assert statements[0].startswith("-- Users table")
        assert "CREATE TABLE users" in statements[0]
        assert "CREATE TABLE questions" in statements[1]
