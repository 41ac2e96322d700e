"""
services/user_service.py
------------------------
Business logic for registering users.
"""

from sqlalchemy.engine import Engine

from models.user import User
from repositories.user_repo import UserRepository


class MissingFieldsError(ValueError):
    """Raised when required user fields are empty."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class UserService:
    """Validates and stores new users."""

    def __init__(self, engine: Engine):
        self.repo = UserRepository(engine)

    def register(self, username: str, email: str, password_hash: str) -> User:
        """
        Store a new user after checking that no required field is empty.

        The password hash is stored as given; hashing is the caller's job.

        Raises:
            MissingFieldsError: If username, email or password_hash is empty.
            sqlalchemy.exc.SQLAlchemyError: If the INSERT fails.
        """
        user = User(username=username, email=email, password_hash=password_hash)
        missing = user.missing_fields()
        if missing:
            raise MissingFieldsError(missing)
        return self.repo.add(user)
