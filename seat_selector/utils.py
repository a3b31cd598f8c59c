import time
from datetime import datetime
from typing import Optional

from seat_selector.models.booking import BookingRecord


def get_current_timestamp_ms() -> int:
    """Get current time as epoch milliseconds"""
    return int(time.time() * 1000)


def format_date(yyyymmdd) -> str:
    """Format a compact date (20241231 or "20241231") as 2024/12/31"""
    s = str(yyyymmdd)
    return f"{s[0:4]}/{s[4:6]}/{s[6:8]}"


def format_booking_time(epoch_ms: int) -> str:
    """Local date and time for an epoch-milliseconds timestamp, empty when unrepresentable"""
    try:
        when = datetime.fromtimestamp(epoch_ms / 1000)
    except (ValueError, OverflowError, OSError):
        return ""
    return f"{format_date(when.strftime('%Y%m%d'))} {when.strftime('%H:%M:%S')}"


def last_booking_info(booking: Optional[BookingRecord]) -> str:
    """Display line for the most recent booking, empty when there is nothing to show"""
    if booking is None or not booking.seats:
        return ""

    seats_text = ", ".join(seat.code for seat in booking.seats)
    when = format_booking_time(booking.time)
    return f"Last booking ({when}): {seats_text} · ${booking.total}"
