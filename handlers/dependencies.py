"""
handlers/dependencies.py
------------------------
FastAPI dependencies that hand the shared engine to the services and
decode request bodies.
The engine is attached to ``app.state`` by ``main.create_app``.
"""

from typing import Callable

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import Engine

from services.question_service import QuestionService
from services.user_service import UserService


def get_engine(request: Request) -> Engine:
    return request.app.state.engine


def get_user_service(engine: Engine = Depends(get_engine)) -> UserService:
    return UserService(engine)


def get_question_service(engine: Engine = Depends(get_engine)) -> QuestionService:
    return QuestionService(engine)


def json_body(model: type[BaseModel]) -> Callable:
    """
    Build a dependency that decodes the raw body as JSON into ``model``.

    The Content-Type header is ignored, so ``curl -d`` (form encoded)
    and ``text/plain`` clients are decoded the same way as JSON ones.
    Decoding failures go through the RequestValidationError handler.
    """
    async def parse(request: Request) -> BaseModel:
        body = await request.body()
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise RequestValidationError(e.errors()) from e

    return parse
