"""Connected user listing route."""
from typing import List

from fastapi import APIRouter, Depends

from . import schemas
from .deps import get_hub
from .hub import BroadcastHub

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[schemas.UserOut])
async def list_users(hub: BroadcastHub = Depends(get_hub)):
    return hub.user_list()
