"""
repositories/question_repo.py
------------------------------
Data access layer for questions.
All SQL queries related to the `questions` table live here.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from models.question import Question
from utils.logger import get_logger

logger = get_logger(__name__)


class QuestionRepository:
    """Repository for INSERT operations on the questions table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def add(self, question: Question) -> Question:
        """
        Insert a new question.

        Returns:
            The same Question with its `id` populated.
        """
        sql = text("""
            INSERT INTO questions (qualification_id, topic_id, author_user_id, question_data)
            VALUES (:qualification_id, :topic_id, :author_user_id, :question_data)
        """)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(sql, {
                    "qualification_id": question.qualification_id,
                    "topic_id": question.topic_id,
                    "author_user_id": question.author_user_id,
                    "question_data": question.question_data,
                })
                question.id = result.lastrowid
            logger.info(f"Added question #{question.id} by user {question.author_user_id}")
            return question
        except SQLAlchemyError as e:
            logger.error(f"Database INSERT error for question: {e}")
            raise
