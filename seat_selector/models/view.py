from typing import List, Optional

from pydantic import BaseModel

from seat_selector.models.booking import BookingRecord, BookingStep
from seat_selector.models.seat import GridView, SeatPatch


class SurfaceTotals(BaseModel):
    count: int
    total: int


class SummaryView(BaseModel):
    count: int
    total: int
    items: List[str]
    desktop: SurfaceTotals
    mobile: SurfaceTotals
    clear_disabled: bool
    confirm_disabled: bool
    mobile_confirm_disabled: bool


class SessionSnapshot(BaseModel):
    sector: str
    grid: GridView
    summary: SummaryView
    booking_step: BookingStep
    last_booking_info: str


class SeatToggleResponse(BaseModel):
    patch: SeatPatch
    summary: SummaryView


class SeatClearResponse(BaseModel):
    patches: List[SeatPatch]
    summary: SummaryView


class SectorChangeResponse(BaseModel):
    sector: str
    rebuilt: bool
    grid: Optional[GridView] = None
    summary: SummaryView


class BookingConfirmResponse(BaseModel):
    notice: str
    booking: BookingRecord
    saved: bool
    patches: List[SeatPatch]
    summary: SummaryView
    last_booking_info: str


class LayoutResponse(BaseModel):
    mode: str  # mobile, tablet, desktop
    label: str
    hint: str
