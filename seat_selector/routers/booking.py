from fastapi import APIRouter, Depends, HTTPException

from seat_selector.dependencies import get_session
from seat_selector.exceptions import SeatSelectorError
from seat_selector.models.booking import (BookingStep, ConfirmBookingRequest,
                                          LastBookingResponse, OpenBookingRequest)
from seat_selector.models.view import BookingConfirmResponse
from seat_selector.session import SeatingSession

router = APIRouter(prefix="/booking", tags=["booking"])


@router.post("/open", response_model=BookingStep)
async def open_booking(
    open_request: OpenBookingRequest = None,
    session: SeatingSession = Depends(get_session),
):
    """Open the confirmation step for the current selection"""
    try:
        context = open_request.context if open_request else "desktop"
        return session.on_open_booking(context)
    except SeatSelectorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/cancel", response_model=BookingStep)
async def cancel_booking(session: SeatingSession = Depends(get_session)):
    """Close the confirmation step without booking"""
    try:
        return session.on_cancel()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/confirm", response_model=BookingConfirmResponse)
async def confirm_booking(
    confirm_request: ConfirmBookingRequest = None,
    session: SeatingSession = Depends(get_session),
):
    """Save the (simulated) booking and reset the selection"""
    try:
        name = (confirm_request.name if confirm_request else "") or ""
        email = (confirm_request.email if confirm_request else "") or ""
        return session.on_confirm(name, email)
    except SeatSelectorError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.get("/last", response_model=LastBookingResponse)
async def get_last_booking(session: SeatingSession = Depends(get_session)):
    """Most recent stored booking, if any"""
    try:
        return session.last_booking()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
