from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from luvatrix_itemchart.engine import LayoutResult
from luvatrix_itemchart.geometry import Rect


@dataclass(frozen=True)
class CategoryAnchors:
    bounds: Rect | None
    tooltip: tuple[float, float] | None
    label_box: Rect


def cells_bounds(rects: Iterable[Rect]) -> Rect | None:
    out: Rect | None = None
    for rect in rects:
        out = rect if out is None else out.union(rect)
    return out


def tooltip_anchor(bounds: Rect, *, inverted: bool = False) -> tuple[float, float]:
    """Top-center of the cell block, axis-swapped for inverted charts."""
    if inverted:
        return (bounds.y, bounds.x)
    return (bounds.x + bounds.width / 2.0, bounds.y)


def data_label_box(bounds: Rect | None) -> Rect:
    if bounds is None:
        return Rect(x=0.0, y=0.0, width=0.0, height=0.0)
    return bounds


def category_anchors(result: LayoutResult, *, inverted: bool = False) -> dict[Hashable, CategoryAnchors]:
    out: dict[Hashable, CategoryAnchors] = {}
    for category_id in result.categories:
        bounds = cells_bounds(result.rects_for(category_id))
        out[category_id] = CategoryAnchors(
            bounds=bounds,
            tooltip=None if bounds is None else tooltip_anchor(bounds, inverted=inverted),
            label_box=data_label_box(bounds),
        )
    return out
