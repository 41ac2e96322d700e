"""
handlers/health_handler.py
--------------------------
Liveness probe for the container orchestrator.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

health_router = APIRouter()

# Every method is answered; probes differ in which one they send.
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


@health_router.api_route("/health", methods=_ALL_METHODS, response_class=PlainTextResponse)
def health() -> str:
    """Always 200; the database is deliberately not checked."""
    return "OK"
