"""TypeOne route group, registered only when the ``typeone`` profile is active."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["TypeOne"])


@router.get("/message", response_class=PlainTextResponse)
async def get_message() -> str:
    """Return the TypeOne greeting."""
    return "Hello from TypeOne Controller!"


@router.get("/info", response_class=PlainTextResponse)
async def get_info() -> str:
    """Return the TypeOne description."""
    return "TypeOne Controller provides general information."
