"""Plain‑text landing route."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = (
    "Welcome, this is Roxiler company assignment backend domain. "
    "Please access any path to get the data"
)


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE
