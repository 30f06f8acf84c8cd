from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from decimal import Decimal
import math
from typing import Any

import numpy as np

from luvatrix_itemchart.errors import ItemChartDataError
from luvatrix_itemchart.geometry import Rect


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Category:
    """One data point of an item series.

    ``footprint`` is the pixel box resolved by the column geometry of the
    surrounding chart; the sign of ``value`` picks the stacking direction.
    """

    id: Hashable
    value: float
    footprint: Rect

    @property
    def magnitude(self) -> float:
        if not math.isfinite(self.value):
            return 0.0
        return abs(float(self.value))

    @property
    def cell_count(self) -> int:
        # A partial unit still occupies a whole cell.
        return int(math.ceil(self.magnitude))

    @property
    def is_negative(self) -> bool:
        return math.isfinite(self.value) and self.value < 0


def normalize_values(values: Any) -> np.ndarray:
    """Return ``values`` as 1-D float64 with null points (None, NaN, inf) set to zero."""
    return _to_value_array(_as_1d_array(values))


def build_categories(
    values: Any,
    footprints: Sequence[Rect],
    *,
    ids: Sequence[Hashable] | None = None,
) -> list[Category]:
    arr = normalize_values(values)
    if arr.size != len(footprints):
        raise ItemChartDataError(f"values and footprints length mismatch: {arr.size} != {len(footprints)}")
    if ids is None:
        ids = list(range(arr.size))
    elif len(ids) != arr.size:
        raise ItemChartDataError(f"values and ids length mismatch: {arr.size} != {len(ids)}")
    return [
        Category(id=cid, value=float(value), footprint=footprint)
        for cid, value, footprint in zip(ids, arr.tolist(), footprints, strict=True)
    ]


def _as_1d_array(values: Any) -> np.ndarray:
    if torch is not None and isinstance(values, torch.Tensor):
        values = values.detach().cpu().to(torch.float64).numpy()
    elif pd is not None and isinstance(values, pd.Series):
        values = values.to_numpy()
    elif isinstance(values, (str, bytes, bytearray)) or not isinstance(values, (np.ndarray, Sequence)):
        raise ItemChartDataError(f"unsupported values input type: {type(values)!r}")

    arr = values if isinstance(values, np.ndarray) else np.asarray(values, dtype=object)
    if arr.ndim != 1:
        raise ItemChartDataError(f"values must be 1-D, got shape {arr.shape}")
    return arr


def _to_value_array(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "b"}:
        return arr.astype(np.float64)
    if arr.dtype.kind == "f":
        out = arr.astype(np.float64)
    else:
        out = np.fromiter((_unit_value(raw, i) for i, raw in enumerate(arr.tolist())), dtype=np.float64, count=arr.size)
    out[~np.isfinite(out)] = 0.0
    return out


def _unit_value(raw: Any, index: int) -> float:
    if raw is None:
        return 0.0
    if isinstance(raw, Decimal):
        return float(raw)
    if isinstance(raw, (str, bytes)):
        raise ItemChartDataError(f"values contains non-numeric value at index {index}: {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ItemChartDataError(f"values contains non-numeric value at index {index}: {raw!r}") from exc
