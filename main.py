"""
main.py
-------
Entry point for the question-bank data API.

Responsibilities:
    - Check the required environment.
    - Open the MariaDB connection pool and wait until the database answers.
    - Apply schema.sql.
    - Build the FastAPI application and serve it with uvicorn.
"""

import sys
from typing import NoReturn

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

import config
from db.connection import (
    DatabaseUnavailableError,
    RetryPolicy,
    build_database_url,
    create_db_engine,
    wait_for_database,
)
from db.init_db import SchemaFileError, initialize_schema
from handlers.data_handler import data_router
from handlers.error_handler import register_error_handlers
from handlers.health_handler import health_router
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(engine: Engine) -> FastAPI:
    """
    Build the application around an already-opened engine.

    Args:
        engine: Connection pool shared by all request handlers.
    """
    app = FastAPI(title="Question Bank Data API")
    app.state.engine = engine

    register_error_handlers(app)
    app.include_router(data_router, tags=["data"])
    app.include_router(health_router, tags=["health"])
    return app


def _fatal(message: str) -> NoReturn:
    logger.critical(message)
    sys.exit(1)


def main() -> None:
    """Initialize the database and run the API server."""

    # ── 1. Configuration ──────────────────────────────────
    missing = config.missing_required_env()
    if missing:
        _fatal(f"{', '.join(missing)} environment variable not set.")

    # ── 2. Connection pool ────────────────────────────────
    url = build_database_url(config.MARIADB_USER, config.MARIADB_PASSWORD, config.MARIADB_DATABASE)
    logger.info(f"Attempting to connect to MariaDB: {config.DB_HOST}")
    try:
        engine = create_db_engine(url)
    except SQLAlchemyError as e:
        _fatal(f"Failed to open database connection: {e}")

    policy = RetryPolicy(
        max_attempts=config.DB_CONNECT_MAX_ATTEMPTS,
        interval_seconds=config.DB_CONNECT_RETRY_INTERVAL,
    )
    try:
        wait_for_database(engine, policy)
    except DatabaseUnavailableError as e:
        _fatal(str(e))

    # ── 3. Schema ─────────────────────────────────────────
    try:
        initialize_schema(engine, config.SCHEMA_FILE_PATH)
    except SchemaFileError as e:
        _fatal(f"Database initialization failed: {e}")

    # ── 4. HTTP server ────────────────────────────────────
    app = create_app(engine)
    logger.info(f"🚀 API server starting on {config.API_HOST}:{config.API_PORT}...")
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
