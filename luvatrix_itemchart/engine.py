from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
import logging
from typing import Any

from luvatrix_itemchart.config import SeriesConfig
from luvatrix_itemchart.data import Category
from luvatrix_itemchart.errors import ConfigurationError, DegenerateInputWarning
from luvatrix_itemchart.geometry import Rect
from luvatrix_itemchart.grid import GridSolution, shared_column_width, solve_grid
from luvatrix_itemchart.placement import place_cells
from luvatrix_itemchart.reconcile import CellHandle, CellReconciler, ReconcileResult


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    grid: GridSolution | None
    categories: dict[Hashable, ReconcileResult] = field(default_factory=dict)
    warnings: tuple[DegenerateInputWarning, ...] = ()

    def created(self) -> list[CellHandle]:
        return [h for res in self.categories.values() for h in res.created]

    def updated(self) -> list[CellHandle]:
        return [h for res in self.categories.values() for h in res.updated]

    def stale(self) -> list[CellHandle]:
        return [h for res in self.categories.values() for h in res.stale]

    def rects_for(self, category_id: Hashable) -> tuple[Rect, ...]:
        res = self.categories.get(category_id)
        if res is None:
            return ()
        return res.rects


class SeriesLayoutEngine:
    """Lays out the cells of one item series and tracks their identity across passes."""

    def __init__(self, reconciler: CellReconciler | None = None) -> None:
        self._reconciler = reconciler if reconciler is not None else CellReconciler()
        self._grid_key: tuple[Any, ...] | None = None
        self._grid: GridSolution | None = None
        self._last_grid: GridSolution | None = None

    @property
    def reconciler(self) -> CellReconciler:
        return self._reconciler

    @property
    def last_grid(self) -> GridSolution | None:
        return self._last_grid

    def reset(self) -> None:
        self._reconciler.reset()
        self._grid_key = None
        self._grid = None
        self._last_grid = None

    def layout(self, categories: Sequence[Category], config: SeriesConfig) -> LayoutResult:
        # Everything that can fail runs before reconciler history is touched.
        self._validate(categories, config)
        warnings = self._collect_warnings(categories)
        grid = self._resolve_grid(categories, config)
        self._last_grid = grid
        if grid is None:
            if any(c.cell_count > 0 for c in categories):
                message = "no drawable category has cells; nothing to lay out"
            else:
                message = "all category values are zero; nothing to lay out"
            warnings.append(DegenerateInputWarning(message))

        for warning in warnings:
            LOGGER.warning("%s", warning)

        results: dict[Hashable, ReconcileResult] = {}
        for category in categories:
            rects: list[Rect] = []
            if grid is not None and category.footprint.is_drawable():
                rects = place_cells(category, grid)
            results[category.id] = self._reconciler.reconcile(category.id, rects)

        current = set(results)
        for category_id in self._reconciler.tracked_categories():
            if category_id not in current:
                results[category_id] = self._reconciler.release(category_id)

        return LayoutResult(grid=grid, categories=results, warnings=tuple(warnings))

    def _validate(self, categories: Sequence[Category], config: SeriesConfig) -> None:
        if not isinstance(config, SeriesConfig):
            raise ConfigurationError(f"config must be a SeriesConfig, got {type(config)!r}")
        seen: set[Hashable] = set()
        for category in categories:
            if category.id in seen:
                raise ConfigurationError(f"duplicate category id in one pass: {category.id!r}")
            seen.add(category.id)
        if any(c.footprint.is_drawable() for c in categories):
            shared_column_width(categories)

    def _collect_warnings(self, categories: Sequence[Category]) -> list[DegenerateInputWarning]:
        out: list[DegenerateInputWarning] = []
        for category in categories:
            if category.cell_count > 0 and not category.footprint.is_drawable():
                out.append(
                    DegenerateInputWarning(
                        f"category {category.id!r} has a non-positive footprint {category.footprint}; skipped",
                        category_id=category.id,
                    )
                )
        return out

    def _resolve_grid(self, categories: Sequence[Category], config: SeriesConfig) -> GridSolution | None:
        drawable = [c for c in categories if c.footprint.is_drawable()]
        if not any(c.cell_count > 0 for c in drawable):
            return None
        key = (
            tuple(c.cell_count for c in drawable),
            tuple(float(c.footprint.height) for c in drawable),
            float(drawable[0].footprint.width),
            config,
        )
        if key != self._grid_key or self._grid is None:
            self._grid = solve_grid(drawable, config)
            self._grid_key = key
        return self._grid
