from __future__ import annotations

import unittest

from luvatrix_itemchart import CellId, CellReconciler, Rect


def _rects(n: int, *, y: float = 0.0) -> list[Rect]:
    return [Rect(x=float(i), y=y, width=1.0, height=1.0) for i in range(n)]


class CellReconcilerTests(unittest.TestCase):
    def test_first_pass_creates_every_cell(self) -> None:
        rec = CellReconciler()
        res = rec.reconcile("a", _rects(3))
        self.assertEqual(len(res.created), 3)
        self.assertEqual(res.updated, ())
        self.assertEqual(res.stale, ())
        self.assertEqual([h.cell_id for h in res.created], [CellId("a", 0), CellId("a", 1), CellId("a", 2)])

    def test_growth_keeps_existing_handles_and_appends(self) -> None:
        rec = CellReconciler()
        first = rec.reconcile("a", _rects(3))
        res = rec.reconcile("a", _rects(5, y=2.0))
        self.assertEqual([h.unit_index for h in res.updated], [0, 1, 2])
        self.assertEqual([h.unit_index for h in res.created], [3, 4])
        self.assertEqual(res.stale, ())
        for old, new in zip(first.created, res.updated):
            self.assertIs(old, new)
            self.assertEqual(new.rect.y, 2.0)
            self.assertEqual(new.previous_rect.y, 0.0)

    def test_shrink_drops_highest_indices(self) -> None:
        rec = CellReconciler()
        rec.reconcile("a", _rects(5))
        res = rec.reconcile("a", _rects(2))
        self.assertEqual([h.unit_index for h in res.updated], [0, 1])
        self.assertEqual([h.unit_index for h in res.stale], [2, 3, 4])
        self.assertEqual(res.created, ())
        self.assertTrue(all(not h.active for h in res.stale))
        self.assertEqual(rec.handle_count(), 2)

    def test_unchanged_input_updates_in_place(self) -> None:
        rec = CellReconciler()
        rec.reconcile("a", _rects(4))
        res = rec.reconcile("a", _rects(4))
        self.assertEqual(len(res.updated), 4)
        self.assertEqual(res.created, ())
        self.assertEqual(res.stale, ())
        self.assertEqual(res.rects, tuple(_rects(4)))

    def test_categories_are_tracked_independently(self) -> None:
        rec = CellReconciler()
        rec.reconcile("a", _rects(2))
        rec.reconcile("b", _rects(3))
        res = rec.reconcile("a", _rects(1))
        self.assertEqual(len(res.stale), 1)
        self.assertEqual(len(rec.handles("b")), 3)
        self.assertEqual(rec.tracked_categories(), ("a", "b"))

    def test_release_reports_all_cells_stale(self) -> None:
        rec = CellReconciler()
        rec.reconcile("a", _rects(3))
        res = rec.release("a")
        self.assertEqual(len(res.stale), 3)
        self.assertEqual(rec.tracked_categories(), ())

    def test_reset_forgets_history(self) -> None:
        rec = CellReconciler()
        rec.reconcile("a", _rects(3))
        rec.reset()
        res = rec.reconcile("a", _rects(3))
        self.assertEqual(len(res.created), 3)
        self.assertEqual(res.updated, ())


if __name__ == "__main__":
    unittest.main()
