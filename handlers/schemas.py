"""
handlers/schemas.py
-------------------
Request and response bodies of the data endpoints.

Absent keys and explicit nulls fall back to zero values ("" / 0), and a
bare ``null`` body counts as an empty object; the user handler then
rejects the empty fields. Types are strict: "7" is not an int.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator


class _ZeroValueBody(BaseModel):
    model_config = ConfigDict(strict=True)

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("*", mode="before")
    @classmethod
    def _null_field_is_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class UserCreate(_ZeroValueBody):
    username: str = ""
    email: str = ""
    password_hash: str = ""


class QuestionCreate(_ZeroValueBody):
    qualification_id: int = 0
    topic_id: int = 0
    author_user_id: int = 0
    question_data: str = ""


class CreatedResponse(BaseModel):
    message: str
    id: int
