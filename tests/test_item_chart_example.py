from __future__ import annotations

import importlib.util
from pathlib import Path
import unittest

from luvatrix_itemchart import SeriesConfig


def _load_demo():
    path = Path(__file__).resolve().parents[1] / "examples" / "item_chart" / "election_demo.py"
    spec = importlib.util.spec_from_file_location("election_demo", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class ElectionDemoTests(unittest.TestCase):
    def test_footprints_share_width_and_respect_sign(self) -> None:
        demo = _load_demo()
        fps = demo.column_footprints([49, -16], plot_width=200.0, plot_height=250.0, y_min=-50.0, y_max=200.0)
        self.assertEqual(fps[0].width, fps[1].width)
        self.assertEqual(fps[0].bottom, fps[1].y)

    def test_demo_runs_and_logs_each_tick(self) -> None:
        demo = _load_demo()
        with self.assertLogs("election_demo", level="INFO") as logs:
            demo.run(3, plot_width=600.0, plot_height=400.0, config=SeriesConfig(min_columns=5, max_columns=5))
        self.assertEqual(len([r for r in logs.records if "tick=" in r.getMessage()]), 3)


if __name__ == "__main__":
    unittest.main()
