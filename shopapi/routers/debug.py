# shopapi/routers/debug.py
import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/debug", tags=["Debug"])

logger = logging.getLogger(__name__)


@router.post("/echo", response_class=PlainTextResponse)
async def echo(request: Request):
    """
    Return the raw request body unchanged.

    Handy for checking what a client actually sends. Only mounted when
    ENABLE_ECHO_ENDPOINT is set.
    """
    body = await request.body()
    text = body.decode("utf-8", errors="replace")
    logger.debug("Raw request body: %s", text)
    return text
