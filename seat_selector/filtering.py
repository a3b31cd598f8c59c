from typing import Iterable, List, Optional, Tuple

from seat_selector.config import SECTORS
from seat_selector.exceptions import UnknownSectorError
from seat_selector.models.seat import CatalogSeat


def validate_sector(sector: str) -> str:
    """Return the sector key unchanged, raising for names outside the sector table"""
    if sector not in SECTORS:
        raise UnknownSectorError(sector)
    return sector


def sector_range(sector: str) -> Optional[Tuple[int, int]]:
    """Column range (from, to) for a sector, None when it imposes no filter"""
    bounds = SECTORS[validate_sector(sector)]
    if bounds is None:
        return None
    return bounds["from"], bounds["to"]


def is_visible(col: int, sector: str) -> bool:
    bounds = sector_range(sector)
    if bounds is None:
        return True
    start, end = bounds
    return start <= col <= end


def filter_seats(seats: Iterable[CatalogSeat], sector: str) -> List[CatalogSeat]:
    """Keep the seats rendered under a sector; selection is never consulted"""
    return [seat for seat in seats if is_visible(seat.col, sector)]
