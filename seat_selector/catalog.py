import re
from typing import Iterator, Optional

from seat_selector.config import BASE_PRICE, COLS, OCCUPIED, PRICE_TIERS, ROWS
from seat_selector.models.seat import CatalogSeat

SEAT_CODE_PATTERN = re.compile(r"^([A-Z])-(\d{1,2})$")


def row_label(index: int) -> str:
    """Row letter for a 0-based row index (A, B, C ...)"""
    return chr(ord("A") + index)


def seat_code(row: str, col: int) -> str:
    return f"{row}-{col}"


def price_for_row(row_index: int) -> int:
    """Front rows are cheaper, middle rows cost more, back rows pay the base price"""
    for last_index, delta in PRICE_TIERS:
        if row_index <= last_index:
            return BASE_PRICE + delta
    return BASE_PRICE


def is_occupied(code: str) -> bool:
    return code in OCCUPIED


def seat_at(row_index: int, col: int) -> CatalogSeat:
    """Catalog entry for an in-range position (row_index 0-based, col 1-based)"""
    row = row_label(row_index)
    code = seat_code(row, col)
    return CatalogSeat(
        code=code,
        row=row,
        row_index=row_index,
        col=col,
        price=price_for_row(row_index),
        occupied=is_occupied(code),
    )


def find_seat(code: str) -> Optional[CatalogSeat]:
    """Look up a seat by code, None when the code is malformed or out of range"""
    match = SEAT_CODE_PATTERN.match(code or "")
    if not match:
        return None

    row_index = ord(match.group(1)) - ord("A")
    col = int(match.group(2))
    if row_index >= ROWS or not 1 <= col <= COLS:
        return None

    return seat_at(row_index, col)


def iter_seats() -> Iterator[CatalogSeat]:
    for row_index in range(ROWS):
        for col in range(1, COLS + 1):
            yield seat_at(row_index, col)
