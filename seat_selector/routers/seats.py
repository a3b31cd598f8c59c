from fastapi import APIRouter, Depends, HTTPException, Path

from seat_selector.dependencies import get_session
from seat_selector.exceptions import SeatSelectorError
from seat_selector.models.view import (SeatClearResponse, SeatToggleResponse,
                                       SectorChangeResponse, SessionSnapshot)
from seat_selector.session import SeatingSession

router = APIRouter(tags=["seats"])


@router.get("/seats", response_model=SessionSnapshot)
async def get_seat_map(session: SeatingSession = Depends(get_session)):
    """Full view snapshot: grid for the current sector, summary and booking step"""
    try:
        return session.snapshot()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/seats/clear", response_model=SeatClearResponse)
async def clear_seats(session: SeatingSession = Depends(get_session)):
    """Deselect every seat"""
    try:
        return session.on_clear()
    except SeatSelectorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/seats/{code}/toggle", response_model=SeatToggleResponse)
async def toggle_seat(
    code: str = Path(..., description="Seat code, e.g. C-9"),
    session: SeatingSession = Depends(get_session),
):
    """Select or deselect a seat"""
    try:
        return session.on_toggle_seat(code)
    except SeatSelectorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/sectors/{sector}", response_model=SectorChangeResponse)
async def change_sector(
    sector: str = Path(..., description="all, left, center or right"),
    session: SeatingSession = Depends(get_session),
):
    """Switch the rendered sector; the selection is kept as is"""
    try:
        return session.on_sector_change(sector)
    except SeatSelectorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
