"""
services/question_service.py
----------------------------
Business logic for storing questions.
"""

from sqlalchemy.engine import Engine

from models.question import Question
from repositories.question_repo import QuestionRepository


class QuestionService:
    """Stores new questions."""

    def __init__(self, engine: Engine):
        self.repo = QuestionRepository(engine)

    def create(
        self,
        qualification_id: int,
        topic_id: int,
        author_user_id: int,
        question_data: str,
    ) -> Question:
        """
        Store a question as received. Fields are not checked for emptiness;
        missing references are left to the database's constraints.
        """
        question = Question(
            qualification_id=qualification_id,
            topic_id=topic_id,
            author_user_id=author_user_id,
            question_data=question_data,
        )
        return self.repo.add(question)
