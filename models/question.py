"""
models/question.py
------------------
Domain model for authored questions.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Question:
    """
    Represents a question stored in the questions table.

    Attributes:
        qualification_id: Qualification the question belongs to.
        topic_id: Topic within the qualification.
        author_user_id: ID of the user who wrote it.
        question_data: Serialized question content, opaque to the API.
        id: Database primary key (None for new records).
    """
    qualification_id: int
    topic_id: int
    author_user_id: int
    question_data: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} q{self.qualification_id}/t{self.topic_id} by user {self.author_user_id}"
