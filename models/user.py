"""
models/user.py
--------------
Domain model for registered users.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents an account stored in the users table.

    Attributes:
        username: Login name (unique in the database).
        email: Contact address (unique in the database).
        password_hash: Already-hashed password, stored verbatim.
        id: Database primary key (None for new records).
    """
    username: str
    email: str
    password_hash: str
    id: Optional[int] = None

    def missing_fields(self) -> list[str]:
        """Names of the required fields that are empty."""
        return [
            name for name in ("username", "email", "password_hash")
            if not getattr(self, name)
        ]

    def __str__(self) -> str:
        return f"#{self.id} {self.username} <{self.email}>"
