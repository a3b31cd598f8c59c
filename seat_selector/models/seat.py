from typing import List

from pydantic import BaseModel


class CatalogSeat(BaseModel):
    code: str  # Combined row and col, e.g. "C-9"
    row: str
    row_index: int
    col: int
    price: int
    occupied: bool


class SeatInfo(BaseModel):
    row: str
    col: int
    price: int


class RenderedSeat(BaseModel):
    code: str
    row: str
    col: int
    price: int
    occupied: bool
    selected: bool
    disabled: bool
    state: str  # occupied, available, selected
    aria_label: str
    title: str


class GridRow(BaseModel):
    row: str
    label: str
    seats: List[RenderedSeat]


class GridView(BaseModel):
    sector: str
    rows: List[GridRow]


class SeatPatch(BaseModel):
    code: str
    selected: bool
