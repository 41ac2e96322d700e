"""
db/init_db.py
-------------
Applies the DDL in ``schema.sql`` to the database.

The file is split on ``;`` and every statement runs on its own, so a
statement that fails (typically "table already exists" on a second start)
is logged and skipped instead of aborting the bootstrap.

The split is naive: a ``;`` inside a string literal or a routine body
breaks the statement in two. Keep the schema file to plain DDL.

Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from dataclasses import dataclass, field
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from utils.logger import get_logger

logger = get_logger(__name__)

# Length of the statement prefix quoted in failure logs.
_PREVIEW_CHARS = 50


class SchemaFileError(RuntimeError):
    """Raised when the schema file cannot be read."""


@dataclass
class StatementFailure:
    """A statement that the database rejected, with the driver's message."""
    statement: str
    error: str

    @property
    def preview(self) -> str:
        return self.statement[:_PREVIEW_CHARS]


@dataclass
class BootstrapResult:
    """
    Outcome of one schema bootstrap run.

    Attributes:
        executed: Statements that ran without error.
        failures: Statements that were rejected, in file order.
    """
    executed: int = 0
    failures: list[StatementFailure] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def messages(self) -> list[str]:
        return [f"[{f.preview}...] {f.error}" for f in self.failures]


def split_statements(sql_text: str) -> list[str]:
    """Split a SQL script on ';' and drop the blank pieces."""
    statements = []
    for candidate in sql_text.split(";"):
        candidate = candidate.strip()
        if candidate:
            statements.append(candidate)
    return statements


def read_schema(schema_path: str | Path) -> str:
    """
    Read the schema file as text.

    Raises:
        SchemaFileError: If the file is missing or unreadable.
    """
    try:
        return Path(schema_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaFileError(f"failed to read schema file {schema_path}: {e}") from e


def initialize_schema(engine: Engine, schema_path: str | Path) -> BootstrapResult:
    """
    Execute every statement of the schema file, one transaction each.

    Args:
        engine: The pooled database engine.
        schema_path: Path to the ``;``-separated SQL file.

    Returns:
        A BootstrapResult; statement failures never raise.

    Raises:
        SchemaFileError: If the schema file cannot be read.
    """
    logger.info("Initializing database schema...")
    sql_text = read_schema(schema_path)

    result = BootstrapResult()
    for statement in split_statements(sql_text):
        try:
            with engine.begin() as conn:
                conn.exec_driver_sql(statement)
        except SQLAlchemyError as e:
            failure = StatementFailure(statement=statement, error=str(getattr(e, "orig", None) or e))
            result.failures.append(failure)
            logger.warning(
                f"Failed to execute SQL statement [{failure.preview}...]. Error: {failure.error}"
            )
        else:
            result.executed += 1

    if result.executed > 0:
        logger.info(
            f"Database schema executed successfully! ({result.executed} statements executed)"
        )
    else:
        logger.warning("No SQL statements were successfully executed.")
    return result


if __name__ == "__main__":
    from config import MARIADB_DATABASE, MARIADB_PASSWORD, MARIADB_USER, SCHEMA_FILE_PATH
    from db.connection import build_database_url, create_db_engine, wait_for_database

    engine = create_db_engine(build_database_url(MARIADB_USER, MARIADB_PASSWORD, MARIADB_DATABASE))
    wait_for_database(engine)
    outcome = initialize_schema(engine, SCHEMA_FILE_PATH)
    print(f"✅ {outcome.executed} statements executed, {outcome.failed} skipped.")
