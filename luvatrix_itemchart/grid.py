from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math

import numpy as np

from luvatrix_itemchart.config import SeriesConfig
from luvatrix_itemchart.data import Category
from luvatrix_itemchart.errors import ConfigurationError


LOGGER = logging.getLogger(__name__)

# Slack on the vertical budget so the tallest stack sits comfortably inside
# its footprint instead of filling it exactly.
HEIGHT_BUDGET_SLACK = 1.2
WIDTH_TOLERANCE = 1e-9


@dataclass(frozen=True)
class GridSolution:
    columns: int
    cell_size: float


def shared_column_width(categories: Sequence[Category]) -> float:
    """Return the footprint width every drawable category shares."""
    widths = [float(c.footprint.width) for c in categories if c.footprint.is_drawable()]
    if not widths:
        raise ConfigurationError("no category has a drawable footprint")
    width = widths[0]
    for other in widths[1:]:
        if not math.isclose(other, width, rel_tol=WIDTH_TOLERANCE, abs_tol=WIDTH_TOLERANCE):
            raise ConfigurationError(f"footprint widths differ within one pass: {width} != {other}")
    return width


def solve_grid(categories: Sequence[Category], config: SeriesConfig) -> GridSolution:
    """Pick one column count and square cell size for the whole series.

    Column counts are searched smallest-first from ``config.min_columns``:
    a count is accepted once the units per column fit inside the summed
    footprint height (with slack) at the width-driven cell size. The result
    is clamped to ``config.max_columns`` and the cell is finally sized by the
    tighter of column width and available slot height.
    """
    drawable = [c for c in categories if c.footprint.is_drawable()]
    column_width = shared_column_width(drawable)
    # Every partial unit is drawn as a whole cell, so budget whole cells.
    unit_counts = np.asarray([c.cell_count for c in drawable], dtype=np.float64)
    heights = np.asarray([float(c.footprint.height) for c in drawable], dtype=np.float64)
    total = float(unit_counts.sum())
    if total <= 0:
        raise ConfigurationError("cannot solve a grid for a series whose values are all zero")
    total_height = float(heights.sum())

    columns = max(1, config.min_columns)
    cell_size = column_width / columns
    # Past max_columns the clamp below wins regardless of the fit.
    while columns < total and columns < config.max_columns:
        value_per_column = total / columns
        height_budget = (total_height / cell_size) * HEIGHT_BUDGET_SLACK
        if value_per_column < height_budget:
            break
        columns += 1
        cell_size = column_width / columns

    if columns > config.max_columns:
        columns = config.max_columns

    slot_height = (total_height * columns) / total
    cell_size = min(column_width / columns, slot_height)
    LOGGER.debug(
        "solved item grid: columns=%d cell_size=%.4f total=%.1f column_width=%.2f",
        columns,
        cell_size,
        total,
        column_width,
    )
    return GridSolution(columns=columns, cell_size=cell_size)
