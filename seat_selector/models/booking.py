from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

# Last millisecond of 9999-12-31 UTC, the latest instant datetime can represent
MAX_BOOKING_TIME_MS = 253402300799999


class BookedSeat(BaseModel):
    code: str
    row: str
    col: int
    price: int


class BookingRecord(BaseModel):
    name: str
    email: str
    seats: List[BookedSeat]
    total: int
    time: int = Field(ge=0, le=MAX_BOOKING_TIME_MS)  # epoch milliseconds

    @model_validator(mode="after")
    def check_total(self):
        if self.total != sum(seat.price for seat in self.seats):
            raise ValueError("total must equal the sum of seat prices")
        return self


class OpenBookingRequest(BaseModel):
    context: Literal["desktop", "mobile"] = "desktop"


class ConfirmBookingRequest(BaseModel):
    name: Optional[str] = ""
    email: Optional[str] = ""


class BookingStep(BaseModel):
    open: bool
    context: Optional[str] = None
    summary: str = ""
    hint: str = ""
    name: str = ""
    email: str = ""


class LastBookingResponse(BaseModel):
    booking: Optional[BookingRecord] = None
    info: str
