from luvatrix_itemchart.anchors import CategoryAnchors, category_anchors, cells_bounds, data_label_box, tooltip_anchor
from luvatrix_itemchart.config import SeriesConfig, load_series_config
from luvatrix_itemchart.data import Category, build_categories, normalize_values
from luvatrix_itemchart.engine import LayoutResult, SeriesLayoutEngine
from luvatrix_itemchart.errors import ConfigurationError, DegenerateInputWarning, ItemChartDataError, ItemChartError
from luvatrix_itemchart.geometry import CellId, Rect, Slot, rects_to_array, slot_for_unit
from luvatrix_itemchart.grid import GridSolution, solve_grid
from luvatrix_itemchart.placement import iter_cell_rects, place_cells
from luvatrix_itemchart.reconcile import CellHandle, CellReconciler, ReconcileResult

__all__ = [
    "Category",
    "CategoryAnchors",
    "CellHandle",
    "CellId",
    "CellReconciler",
    "ConfigurationError",
    "DegenerateInputWarning",
    "GridSolution",
    "ItemChartDataError",
    "ItemChartError",
    "LayoutResult",
    "ReconcileResult",
    "Rect",
    "SeriesConfig",
    "SeriesLayoutEngine",
    "Slot",
    "build_categories",
    "category_anchors",
    "cells_bounds",
    "data_label_box",
    "iter_cell_rects",
    "load_series_config",
    "normalize_values",
    "place_cells",
    "rects_to_array",
    "slot_for_unit",
    "solve_grid",
    "tooltip_anchor",
]
