"""
handlers/data_handler.py
------------------------
POST endpoints that store users and questions.
Other methods on these paths get 405 from the router.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from handlers.dependencies import get_question_service, get_user_service, json_body
from handlers.schemas import CreatedResponse, QuestionCreate, UserCreate
from services.question_service import QuestionService
from services.user_service import MissingFieldsError, UserService
from utils.logger import get_logger

logger = get_logger(__name__)

data_router = APIRouter(prefix="/api/data")

MISSING_USER_FIELDS = "Missing required fields (username, email, password_hash)"
USER_DB_ERROR = "Failed to save user due to database error (e.g., duplicate email)"
QUESTION_DB_ERROR = "Failed to save data due to database error"


@data_router.post("/user", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate = Depends(json_body(UserCreate)),
    service: UserService = Depends(get_user_service),
):
    """Store a user; every field must be non-empty."""
    try:
        user = service.register(payload.username, payload.email, payload.password_hash)
    except MissingFieldsError as e:
        logger.info(f"Rejected user payload: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_USER_FIELDS)
    except SQLAlchemyError:
        # Details are logged by the repository and stay server-side.
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=USER_DB_ERROR)

    return CreatedResponse(message="User saved successfully", id=user.id)


@data_router.post("/question", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    payload: QuestionCreate = Depends(json_body(QuestionCreate)),
    service: QuestionService = Depends(get_question_service),
):
    """Store a question as received."""
    try:
        question = service.create(
            payload.qualification_id,
            payload.topic_id,
            payload.author_user_id,
            payload.question_data,
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=QUESTION_DB_ERROR)

    return CreatedResponse(message="Question saved successfully", id=question.id)
