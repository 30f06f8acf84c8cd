from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from luvatrix_itemchart import Rect, SeriesConfig, SeriesLayoutEngine, build_categories, category_anchors


LOGGER = logging.getLogger("election_demo")
PARTIES = ("LAB", "CON", "LDM", "GRN", "SDP", "RFM")
SEAT_SHARE = (49, 50, -16, 4, 2, 1)


def column_footprints(
    values: list[float],
    *,
    plot_width: float,
    plot_height: float,
    y_min: float,
    y_max: float,
    bar_width: float = 0.8,
) -> list[Rect]:
    slot_w = plot_width / len(values)
    scale = plot_height / (y_max - y_min)
    baseline = y_max * scale
    out: list[Rect] = []
    for i, value in enumerate(values):
        width = slot_w * bar_width
        x = i * slot_w + (slot_w - width) / 2.0
        height = abs(value) * scale
        y = baseline - height if value >= 0 else baseline
        out.append(Rect(x=x, y=y, width=width, height=height))
    return out


def run(ticks: int, *, plot_width: float, plot_height: float, config: SeriesConfig) -> None:
    engine = SeriesLayoutEngine()
    values = list(SEAT_SHARE)
    for tick in range(ticks):
        footprints = column_footprints(values, plot_width=plot_width, plot_height=plot_height, y_min=-50.0, y_max=200.0)
        categories = build_categories(values, footprints, ids=PARTIES)
        result = engine.layout(categories, config)
        LOGGER.info(
            "tick=%d grid=%s created=%d updated=%d stale=%d",
            tick,
            result.grid,
            len(result.created()),
            len(result.updated()),
            len(result.stale()),
        )
        for party, anchors in category_anchors(result).items():
            LOGGER.debug("  %s tooltip=%s label_box=%s", party, anchors.tooltip, anchors.label_box)
        values[0] = min(200, values[0] + 1)


def main() -> None:
    parser = argparse.ArgumentParser(prog="election_demo")
    parser.add_argument("--ticks", type=int, default=5)
    parser.add_argument("--width", type=float, default=600.0)
    parser.add_argument("--height", type=float, default=400.0)
    parser.add_argument("--min-columns", type=int, default=5)
    parser.add_argument("--max-columns", type=int, default=5)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = SeriesConfig(min_columns=args.min_columns, max_columns=args.max_columns)
    run(args.ticks, plot_width=args.width, plot_height=args.height, config=config)


if __name__ == "__main__":
    main()
