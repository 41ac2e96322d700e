"""
handlers/error_handler.py
-------------------------
Maps request decoding failures to 400 responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.logger import get_logger

logger = get_logger(__name__)

INVALID_BODY = "Invalid request body (JSON format error)"


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON and wrongly typed fields both end up here."""
    logger.info(f"Invalid request body on {request.method} {request.url.path}: {[err['type'] for err in exc.errors()]}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": INVALID_BODY})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
