from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width * 0.5, self.y + self.height * 0.5)

    def is_drawable(self) -> bool:
        return self.width > 0 and self.height > 0

    def union(self, other: "Rect") -> "Rect":
        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.right, other.right)
        y1 = max(self.bottom, other.bottom)
        return Rect(x=x0, y=y0, width=x1 - x0, height=y1 - y0)

    def contains(self, other: "Rect", tolerance: float = 0.0) -> bool:
        return (
            other.x >= self.x - tolerance
            and other.y >= self.y - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )


@dataclass(frozen=True)
class Slot:
    column: int
    row: int


@dataclass(frozen=True)
class CellId:
    category_id: Hashable
    unit_index: int


def slot_for_unit(unit_index: int, columns: int) -> Slot:
    if columns <= 0:
        raise ValueError("columns must be > 0")
    if unit_index < 0:
        raise ValueError("unit_index must be >= 0")
    row, column = divmod(unit_index, columns)
    return Slot(column=column, row=row)


def rects_to_array(rects: Iterable[Rect]) -> np.ndarray:
    rows = [(r.x, r.y, r.width, r.height) for r in rects]
    if not rows:
        return np.zeros((0, 4), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)
