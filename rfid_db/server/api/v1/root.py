"""
Root Endpoint.

Answers the base path with a static welcome message.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from rfid_db.server.core import constant

router = APIRouter()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Welcome",
    description="Static welcome message; doubles as a liveness indicator.",
)
async def root() -> str:
    return constant.WELCOME_MESSAGE
