"""TypeTwo route group, registered only when the ``typetwo`` profile is active."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["TypeTwo"])


@router.get("/message", response_class=PlainTextResponse)
async def get_message() -> str:
    return "Hello from TypeTwo Controller!"


@router.get("/info", response_class=PlainTextResponse)
async def get_info() -> str:
    return "TypeTwo Controller provides general information."
