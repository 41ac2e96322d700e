"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for INSERT operations on the users table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User domain object to persist.

        Returns:
            The same User with its `id` populated.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: On constraint violations
                (duplicate username/email) or connectivity errors.
        """
        sql = text("""
            INSERT INTO users (username, email, password_hash)
            VALUES (:username, :email, :password_hash)
        """)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(sql, {
                    "username": user.username,
                    "email": user.email,
                    "password_hash": user.password_hash,
                })
                user.id = result.lastrowid
            logger.info(f"Added user #{user.id} ({user.username})")
            return user
        except SQLAlchemyError as e:
            logger.error(f"Database INSERT error for user '{user.username}': {e}")
            raise
