from typing import Optional

from seat_selector.database import BookingStore
from seat_selector.exceptions import BookingStepNotOpenError, EmptySelectionError
from seat_selector.logger_config import logger
from seat_selector.models.booking import BookedSeat, BookingRecord, BookingStep
from seat_selector.selection import SelectionState, calculate_total, sorted_codes
from seat_selector.utils import get_current_timestamp_ms

IDLE = "idle"
CONFIRMATION_OPEN = "confirmation_open"

CHECKOUT_CONTEXTS = {
    "desktop": "Desktop/Tablet",
    "mobile": "Mobile",
}

CONFIRMED_NOTICE = "Booking completed (fake)! It has been saved in this browser only."


def build_booking_record(selection: SelectionState, name: str, email: str,
                         time_ms: Optional[int] = None) -> BookingRecord:
    """Snapshot the selection as a booking record; seats keep selection order"""
    seats = [
        BookedSeat(code=code, row=info.row, col=info.col, price=info.price)
        for code, info in selection.entries()
    ]
    return BookingRecord(
        name=(name or "").strip(),
        email=(email or "").strip(),
        seats=seats,
        total=calculate_total(selection),
        time=time_ms if time_ms is not None else get_current_timestamp_ms(),
    )


class BookingFlow:
    """Confirmation step state machine.

    idle --open_booking_step--> confirmation_open --cancel--> idle
    confirmation_open --confirm--> (record saved, selection cleared) idle

    Opening with an empty selection raises EmptySelectionError and leaves
    the flow idle. Customer name and email are only kept while the step is
    open.
    """

    def __init__(self, store: BookingStore):
        self.store = store
        self.state = IDLE
        self.context: Optional[str] = None
        self.summary = ""
        self.hint = ""

    @property
    def is_open(self) -> bool:
        return self.state == CONFIRMATION_OPEN

    def view(self) -> BookingStep:
        if not self.is_open:
            return BookingStep(open=False)
        return BookingStep(
            open=True,
            context=self.context,
            summary=self.summary,
            hint=self.hint,
            name="",
            email="",
        )

    def open_booking_step(self, selection: SelectionState, context: str = "desktop") -> BookingStep:
        if len(selection) == 0:
            logger.info("Booking step rejected: no seats selected")
            raise EmptySelectionError()

        label = CHECKOUT_CONTEXTS.get(context, CHECKOUT_CONTEXTS["desktop"])
        count = len(selection)
        total = calculate_total(selection)
        seats_str = ", ".join(sorted_codes(selection))

        self.context = label
        self.summary = f"{count} seat(s): {seats_str} · Total ${total}"
        self.hint = (
            f"This is a simulated {label} checkout. "
            "Your booking will be saved locally in this browser."
        )
        self.state = CONFIRMATION_OPEN
        logger.info(f"Booking step opened ({label}) for {count} seat(s)")
        return self.view()

    def cancel(self) -> BookingStep:
        if self.is_open:
            logger.info("Booking step cancelled")
        self._reset()
        return self.view()

    def confirm(self, selection: SelectionState, name: str = "", email: str = ""):
        """Persist the booking and clear the selection.

        Returns (record, saved, cleared_codes). A failed save is still a
        completed booking from the user's point of view.
        """
        if not self.is_open:
            raise BookingStepNotOpenError()
        if len(selection) == 0:
            self._reset()
            raise EmptySelectionError()

        record = build_booking_record(selection, name, email)
        saved = self.store.save(record)
        self._reset()
        cleared = selection.clear()
        logger.info(f"Booking confirmed for {len(record.seats)} seat(s), total ${record.total}")
        return record, saved, cleared

    def _reset(self):
        self.state = IDLE
        self.context = None
        self.summary = ""
        self.hint = ""
