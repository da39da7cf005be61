# invoicing/pdf/layout.py
"""
Vertical layout of the item table.

Positions are measured in points from the top edge of the page. Each row
advances a fixed offset; once the cursor passes the page-break line a new
page starts and the cursor returns to the top margin.
"""

from dataclasses import dataclass
from typing import List

PAGE_TOP = 50
TABLE_TOP = 280
FIRST_ROW_Y = TABLE_TOP + 30
ROW_HEIGHT = 25
PAGE_BREAK_Y = 700


@dataclass(frozen=True)
class RowSlot:
    page: int
    y: float


@dataclass(frozen=True)
class TableLayout:
    rows: List[RowSlot]
    end: RowSlot


def layout_item_rows(count: int) -> TableLayout:
    page = 0
    position = FIRST_ROW_Y
    rows: List[RowSlot] = []

    for _ in range(count):
        rows.append(RowSlot(page, position))
        position += ROW_HEIGHT
        if position > PAGE_BREAK_Y:
            page += 1
            position = PAGE_TOP

    return TableLayout(rows=rows, end=RowSlot(page, position))
