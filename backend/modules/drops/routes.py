"""
Drop state endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_drop_service

from .models import DropState
from .service import DropService

router = APIRouter()


@router.get("/drop-state", response_model=DropState)
async def get_drop_state(
    service: DropService = Depends(get_drop_service),
) -> DropState:
    """Current phase of the first drop window, with the copy to show."""
    return service.get_drop_state()
