"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── MariaDB ───────────────────────────────────────────────
# Only checked for presence; the connection is built from the parts below.
DATABASE_URL_MARIA: str = os.getenv("DATABASE_URL_MARIA", "")

MARIADB_USER: str = os.getenv("MARIADB_USER", "")
MARIADB_PASSWORD: str = os.getenv("MARIADB_PASSWORD", "")
MARIADB_DATABASE: str = os.getenv("MARIADB_DATABASE", "")

# Service name of the co-located database container.
DB_HOST: str = "mariadb"
DB_PORT: int = 3306

# ── Startup retry ─────────────────────────────────────────
DB_CONNECT_MAX_ATTEMPTS: int = int(os.getenv("DB_CONNECT_MAX_ATTEMPTS", "10"))
DB_CONNECT_RETRY_INTERVAL: float = float(os.getenv("DB_CONNECT_RETRY_INTERVAL", "2"))

# ── Schema ────────────────────────────────────────────────
SCHEMA_FILE_PATH: str = os.getenv("SCHEMA_FILE_PATH", "schema.sql")

# ── HTTP server ───────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8080"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

REQUIRED_ENV_VARS: tuple[str, ...] = ("DATABASE_URL_MARIA",)


def missing_required_env(names: tuple[str, ...] = REQUIRED_ENV_VARS) -> list[str]:
    """Return the required environment variables that are unset or empty."""
    return [name for name in names if not os.getenv(name)]
