"""Message log route."""
from typing import List

from fastapi import APIRouter, Depends

from . import schemas
from .deps import get_hub
from .hub import BroadcastHub

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=List[schemas.MessageOut], response_model_exclude_none=True)
async def list_messages(hub: BroadcastHub = Depends(get_hub)):
    return hub.message_log()
