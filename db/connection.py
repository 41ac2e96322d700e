"""
db/connection.py
----------------
Manages the MariaDB connection pool.
Uses a SQLAlchemy engine (PyMySQL driver) whose built-in QueuePool
hands out connections to concurrent request handlers.
"""

import time
from dataclasses import dataclass
from typing import Callable

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from config import DB_HOST, DB_PORT
from utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseUnavailableError(RuntimeError):
    """Raised when the database never answered the startup health check."""

    def __init__(self, attempts: int, last_error: Exception | None = None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Failed to ping database after {attempts} attempts: {last_error}")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Fixed linear retry policy for the startup health check.

    Attributes:
        max_attempts: Number of pings before giving up.
        interval_seconds: Pause between two failed pings.
    """
    max_attempts: int = 10
    interval_seconds: float = 2.0


def build_database_url(
    user: str,
    password: str,
    database: str,
    host: str = DB_HOST,
    port: int = DB_PORT,
) -> URL:
    """
    Build the connection URL from discrete credential parts.

    The password is passed through unescaped; ``URL.create`` quotes it.
    """
    return URL.create(
        drivername="mysql+pymysql",
        username=user,
        password=password,
        host=host,
        port=port,
        database=database,
        query={"charset": "utf8"},
    )


def create_db_engine(url: URL | str) -> Engine:
    """
    Open the connection pool.

    Pool size and timeouts are left at SQLAlchemy's defaults. No connection
    is made here; use :func:`wait_for_database` to prove connectivity.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the URL or driver is unusable.
    """
    engine = create_engine(url)
    logger.info(f"Database connection pool created for host '{engine.url.host}'.")
    return engine


def ping(engine: Engine) -> None:
    """Check out a pooled connection and run a trivial query on it."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def wait_for_database(
    engine: Engine,
    policy: RetryPolicy = RetryPolicy(),
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Ping the database until it answers or the retry budget is spent.

    Args:
        engine: The pooled engine to verify.
        policy: Attempt count and fixed pause between attempts.
        sleep: Injected for tests.

    Returns:
        The 1-based attempt number that succeeded.

    Raises:
        DatabaseUnavailableError: If every attempt failed.
    """
    last_error: Exception | None = None
    for attempt in range(1, policy.max_attempts + 1):
        try:
            ping(engine)
        except SQLAlchemyError as e:
            last_error = e
            logger.warning(
                f"Waiting for MariaDB... attempt {attempt}/{policy.max_attempts} (Error: {e})"
            )
            if attempt < policy.max_attempts:
                sleep(policy.interval_seconds)
            continue
        logger.info("Successfully connected to MariaDB.")
        return attempt

    raise DatabaseUnavailableError(policy.max_attempts, last_error)
