from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
import logging
from typing import Any

from luvatrix_itemchart.geometry import CellId, Rect


LOGGER = logging.getLogger(__name__)


@dataclass(eq=False)
class CellHandle:
    """Reconciler record of one drawn cell.

    ``payload`` is left for the renderer to attach its primitive to; the
    layout engine never reads it.
    """

    cell_id: CellId
    rect: Rect
    previous_rect: Rect | None = None
    active: bool = True
    payload: Any = None

    @property
    def category_id(self) -> Hashable:
        return self.cell_id.category_id

    @property
    def unit_index(self) -> int:
        return self.cell_id.unit_index


@dataclass(frozen=True)
class ReconcileResult:
    updated: tuple[CellHandle, ...] = ()
    created: tuple[CellHandle, ...] = ()
    stale: tuple[CellHandle, ...] = ()

    @property
    def rects(self) -> tuple[Rect, ...]:
        return tuple(h.rect for h in (*self.updated, *self.created))

    @property
    def is_empty(self) -> bool:
        return not (self.updated or self.created or self.stale)


@dataclass
class CellReconciler:
    """Per-category cell history for one series instance.

    Unit index is the identity key: index ``i`` keeps its handle while it
    exists, growth appends handles and shrinking drops the highest indices.
    """

    _table: dict[Hashable, list[CellHandle]] = field(default_factory=dict)

    def reconcile(self, category_id: Hashable, new_rects: Sequence[Rect]) -> ReconcileResult:
        handles = self._table.get(category_id, [])
        keep = min(len(handles), len(new_rects))

        updated: list[CellHandle] = []
        for handle, rect in zip(handles[:keep], new_rects[:keep]):
            handle.previous_rect = handle.rect
            handle.rect = rect
            handle.active = True
            updated.append(handle)

        created = [
            CellHandle(cell_id=CellId(category_id=category_id, unit_index=i), rect=new_rects[i])
            for i in range(keep, len(new_rects))
        ]
        stale = handles[keep:]
        for handle in stale:
            handle.active = False

        next_handles = updated + created
        if next_handles:
            self._table[category_id] = next_handles
        else:
            self._table.pop(category_id, None)

        LOGGER.debug(
            "reconciled category %r: updated=%d created=%d stale=%d",
            category_id,
            len(updated),
            len(created),
            len(stale),
        )
        return ReconcileResult(updated=tuple(updated), created=tuple(created), stale=tuple(stale))

    def release(self, category_id: Hashable) -> ReconcileResult:
        return self.reconcile(category_id, ())

    def handles(self, category_id: Hashable) -> tuple[CellHandle, ...]:
        return tuple(self._table.get(category_id, ()))

    def tracked_categories(self) -> tuple[Hashable, ...]:
        return tuple(self._table)

    def handle_count(self, category_ids: Iterable[Hashable] | None = None) -> int:
        ids = self._table if category_ids is None else category_ids
        return sum(len(self._table.get(cid, ())) for cid in ids)

    def reset(self) -> None:
        self._table.clear()
