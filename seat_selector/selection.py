from typing import Dict, Iterator, List, Tuple

from seat_selector.models.seat import SeatInfo
from seat_selector.models.view import SummaryView, SurfaceTotals

PLACEHOLDER_LINE = "No seats selected yet."


class SelectionState:
    """Currently chosen, not-yet-booked seats keyed by seat code.

    Entries keep insertion order, which is the order seats appear in a
    booking record. Filtering by sector never touches this mapping.
    """

    def __init__(self):
        self._seats: Dict[str, SeatInfo] = {}

    def __len__(self) -> int:
        return len(self._seats)

    def __contains__(self, code: str) -> bool:
        return code in self._seats

    def contains(self, code: str) -> bool:
        return code in self._seats

    def toggle(self, code: str, row: str, col: int, price: int) -> bool:
        """Deselect if present, select otherwise. Returns the new selected flag."""
        if code in self._seats:
            del self._seats[code]
            return False

        self._seats[code] = SeatInfo(row=row, col=col, price=price)
        return True

    def clear(self) -> List[str]:
        """Drop every entry and return the codes that were selected"""
        codes = list(self._seats)
        self._seats.clear()
        return codes

    def entries(self) -> Iterator[Tuple[str, SeatInfo]]:
        return iter(list(self._seats.items()))

    def codes(self) -> List[str]:
        return list(self._seats)


def calculate_total(selection: SelectionState) -> int:
    total = 0
    for _, info in selection.entries():
        total += info.price
    return total


def sorted_codes(selection: SelectionState) -> List[str]:
    # Plain string sort: "A-10" comes before "A-2"
    return sorted(selection.codes())


def build_summary(selection: SelectionState) -> SummaryView:
    """Derive count, total and listing for both display surfaces"""
    count = len(selection)
    total = calculate_total(selection)

    if count == 0:
        items = [PLACEHOLDER_LINE]
    else:
        prices = dict((code, info.price) for code, info in selection.entries())
        items = [f"{code} – ${prices[code]}" for code in sorted_codes(selection)]

    disabled = count == 0
    return SummaryView(
        count=count,
        total=total,
        items=items,
        desktop=SurfaceTotals(count=count, total=total),
        mobile=SurfaceTotals(count=count, total=total),
        clear_disabled=disabled,
        confirm_disabled=disabled,
        mobile_confirm_disabled=disabled,
    )
