import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from core.state import get_storage
from storage import SharedStorage

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_class=PlainTextResponse)
async def log_storage(storage: SharedStorage = Depends(get_storage)):
    """Dump the whole storage state to the log."""
    async with storage.read() as s:
        logger.info("Storage: %r", s)
    return "Check your logs, friend."
