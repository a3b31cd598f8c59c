from typing import Iterable, List

from seat_selector.catalog import row_label, seat_at
from seat_selector.config import COLS, ROWS
from seat_selector.filtering import filter_seats
from seat_selector.models.seat import CatalogSeat, GridRow, GridView, RenderedSeat, SeatPatch
from seat_selector.selection import SelectionState


def render_seat(seat: CatalogSeat, selected: bool) -> RenderedSeat:
    """Project a catalog seat into the inspectable attributes of a grid cell"""
    availability = "occupied" if seat.occupied else "available"
    if seat.occupied:
        state = "occupied"
    elif selected:
        state = "selected"
    else:
        state = "available"

    return RenderedSeat(
        code=seat.code,
        row=seat.row,
        col=seat.col,
        price=seat.price,
        occupied=seat.occupied,
        selected=selected,
        disabled=seat.occupied,
        state=state,
        aria_label=f"Row {seat.row}, Seat {seat.col} ({availability})",
        title=f"Row {seat.row}, Seat {seat.col}",
    )


def render_grid(sector: str, selection: SelectionState) -> GridView:
    """Build the whole grid for a sector.

    Called on initial load and when the sector changes. Every row keeps its
    label even when the sector hides all of its seats; previously selected
    seats are marked as selected.
    """
    rows = []
    for row_index in range(ROWS):
        row = row_label(row_index)
        row_seats = (seat_at(row_index, col) for col in range(1, COLS + 1))
        seats = [
            render_seat(seat, selection.contains(seat.code))
            for seat in filter_seats(row_seats, sector)
        ]
        rows.append(GridRow(row=row, label=f"Row {row}", seats=seats))

    return GridView(sector=sector, rows=rows)


def seat_patch(code: str, selected: bool) -> SeatPatch:
    """In-place change of the selected marker of an existing cell"""
    return SeatPatch(code=code, selected=selected)


def clear_patches(codes: Iterable[str]) -> List[SeatPatch]:
    return [seat_patch(code, False) for code in codes]
