from fastapi import APIRouter, Query

from seat_selector.layout import describe_layout
from seat_selector.models.view import LayoutResponse

router = APIRouter(tags=["layout"])


@router.get("/layout", response_model=LayoutResponse)
async def get_layout(width: int = Query(..., ge=0, description="Viewport width in pixels")):
    """Layout mode and guidance copy for a viewport width"""
    return describe_layout(width)
