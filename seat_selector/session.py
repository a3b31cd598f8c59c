from seat_selector.booking_flow import CONFIRMED_NOTICE, BookingFlow
from seat_selector.catalog import find_seat
from seat_selector.config import DEFAULT_SECTOR
from seat_selector.database import BookingStore
from seat_selector.exceptions import (BookingInProgressError, SeatNotFoundError,
                                      SeatOccupiedError)
from seat_selector.filtering import validate_sector
from seat_selector.logger_config import logger
from seat_selector.models.booking import BookingStep, LastBookingResponse
from seat_selector.models.view import (BookingConfirmResponse, SeatClearResponse,
                                       SeatToggleResponse, SectorChangeResponse,
                                       SessionSnapshot, SummaryView)
from seat_selector.rendering import clear_patches, render_grid, seat_patch
from seat_selector.selection import SelectionState, build_summary
from seat_selector.utils import last_booking_info


class SeatingSession:
    """Owns the current sector, the selection and the booking flow.

    Each on_* handler runs synchronously and returns the view data the host
    needs to refresh: seat toggles and clears return per-seat patches, a
    sector change returns a rebuilt grid.
    """

    def __init__(self, store: BookingStore):
        self.store = store
        self.sector = DEFAULT_SECTOR
        self.selection = SelectionState()
        self.flow = BookingFlow(store)

    def summary(self) -> SummaryView:
        return build_summary(self.selection)

    def last_booking(self) -> LastBookingResponse:
        booking = self.store.load_last()
        return LastBookingResponse(booking=booking, info=last_booking_info(booking))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            sector=self.sector,
            grid=render_grid(self.sector, self.selection),
            summary=self.summary(),
            booking_step=self.flow.view(),
            last_booking_info=self.last_booking().info,
        )

    def on_toggle_seat(self, code: str) -> SeatToggleResponse:
        seat = find_seat(code)
        if seat is None:
            raise SeatNotFoundError(code)
        if seat.occupied:
            raise SeatOccupiedError(code)
        if self.flow.is_open:
            raise BookingInProgressError()

        selected = self.selection.toggle(seat.code, seat.row, seat.col, seat.price)
        logger.debug(f"Seat {seat.code} {'selected' if selected else 'deselected'}")
        return SeatToggleResponse(patch=seat_patch(seat.code, selected), summary=self.summary())

    def on_clear(self) -> SeatClearResponse:
        if self.flow.is_open:
            raise BookingInProgressError()
        cleared = self.selection.clear()
        return SeatClearResponse(patches=clear_patches(cleared), summary=self.summary())

    def on_sector_change(self, sector: str) -> SectorChangeResponse:
        validate_sector(sector)
        if sector == self.sector:
            return SectorChangeResponse(sector=sector, rebuilt=False, summary=self.summary())

        self.sector = sector
        # rebuild grid for new sector, keeping selections
        return SectorChangeResponse(
            sector=sector,
            rebuilt=True,
            grid=render_grid(sector, self.selection),
            summary=self.summary(),
        )

    def on_open_booking(self, context: str = "desktop") -> BookingStep:
        return self.flow.open_booking_step(self.selection, context)

    def on_cancel(self) -> BookingStep:
        return self.flow.cancel()

    def on_confirm(self, name: str = "", email: str = "") -> BookingConfirmResponse:
        record, saved, cleared = self.flow.confirm(self.selection, name, email)
        return BookingConfirmResponse(
            notice=CONFIRMED_NOTICE,
            booking=record,
            saved=saved,
            patches=clear_patches(cleared),
            summary=self.summary(),
            last_booking_info=self.last_booking().info,
        )
