from __future__ import annotations

from collections.abc import Iterator

from luvatrix_itemchart.data import Category
from luvatrix_itemchart.geometry import Rect
from luvatrix_itemchart.grid import GridSolution


def row_start_x(category: Category, grid: GridSolution) -> float:
    fp = category.footprint
    size = grid.cell_size
    return fp.x + (fp.width - grid.columns * size + size) / 2.0


def first_row_y(category: Category, grid: GridSolution) -> float:
    fp = category.footprint
    if category.is_negative:
        return fp.y
    return fp.y + fp.height - grid.cell_size


def iter_cell_rects(category: Category, grid: GridSolution) -> Iterator[Rect]:
    """Yield one square per unit of ``category.value`` in fill order.

    Rows fill left to right. Positive values stack upward from the bottom
    of the footprint, negative values downward from its top.
    """
    if grid.columns <= 0:
        raise ValueError("grid columns must be > 0")
    size = grid.cell_size
    start_x = row_start_x(category, grid)
    step_y = size if category.is_negative else -size
    x = start_x
    y = first_row_y(category, grid)
    for unit in range(category.cell_count):
        yield Rect(x=x, y=y, width=size, height=size)
        x += size
        if (unit + 1) % grid.columns == 0:
            x = start_x
            y += step_y


def place_cells(category: Category, grid: GridSolution) -> list[Rect]:
    return list(iter_cell_rects(category, grid))
