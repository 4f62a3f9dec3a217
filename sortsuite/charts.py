"""
Benchmark Chart Generator
=========================
Turns benchmark rows into presentation-ready PNG charts comparing the five
sorting algorithms.

Run:  sortsuite-charts --sizes 100 500 1000 2000 --trials 3
Output: sort_charts/ folder with 3 PNG files.
"""

from __future__ import annotations

import argparse
import os
from collections import defaultdict
from typing import Any, Dict, List, Optional

import numpy as np

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from .algorithms import ALGORITHMS
from .benchmark import DEFAULT_SIZES, print_summary, run_benchmark
from .config import configure_logging
from .generators import PATTERNS

# ────────────────────────────────────────────────────────────
# Color Palette & Styling
# ────────────────────────────────────────────────────────────
COLORS = {
    "bubble":    "#FF6B6B",   # Coral Red
    "selection": "#FCC419",   # Amber
    "insertion": "#CC5DE8",   # Orchid
    "merge":     "#51CF66",   # Emerald Green
    "quick":     "#339AF0",   # Sky Blue
}
BG_COLOR = "#1A1B26"       # Tokyo Night background
CARD_COLOR = "#24283B"     # Card panels
TEXT_COLOR = "#C0CAF5"     # Soft lavender text
GRID_COLOR = "#414868"     # Subtle grid lines


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "axes.labelsize": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 120,
        "savefig.dpi": 120,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def _mean_times_by_size(rows: List[Dict[str, Any]]) -> Dict[str, Dict[int, float]]:
    """tag -> {size: mean seconds}, leaving out sizes where the algorithm was skipped."""
    grouped = defaultdict(lambda: defaultdict(list))
    for row in rows:
        for info in ALGORITHMS.values():
            t = row.get(f"{info.tag}_time")
            if t is not None:
                grouped[info.tag][row["size"]].append(t)
    return {
        tag: {n: float(np.mean(ts)) for n, ts in by_size.items()}
        for tag, by_size in grouped.items()
    }


def _finish(fig, ax, out_dir: str, filename: str) -> str:
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    path = os.path.join(out_dir, filename)
    fig.savefig(path)
    plt.close(fig)
    return path


def chart_timing(rows: List[Dict[str, Any]], out_dir: str) -> str:
    """Grouped bars: mean sort time per algorithm at each size."""
    means = _mean_times_by_size(rows)
    sizes = sorted({row["size"] for row in rows})
    fig, ax = plt.subplots(figsize=(11, 6))
    x = np.arange(len(sizes))
    width = 0.8 / len(ALGORITHMS)

    for i, info in enumerate(ALGORITHMS.values()):
        heights = [means.get(info.tag, {}).get(n, 0.0) for n in sizes]
        ax.bar(x + i * width, heights, width, label=info.name.title(),
               color=COLORS[info.tag], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width * (len(ALGORITHMS) - 1) / 2)
    ax.set_xticklabels([f"n={n}" for n in sizes], fontsize=10)
    ax.set_ylabel("Mean Time (seconds)")
    ax.set_title("Mean Sort Time by Input Size", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)
    return _finish(fig, ax, out_dir, "1_timing.png")


def chart_scalability(rows: List[Dict[str, Any]], out_dir: str) -> str:
    """Log-log lines of time against n; slope approximates the growth exponent."""
    means = _mean_times_by_size(rows)
    fig, ax = plt.subplots(figsize=(10, 6))

    for info in ALGORITHMS.values():
        points = sorted((n, t) for n, t in means.get(info.tag, {}).items() if n > 0 and t > 0)
        if not points:
            continue
        ns, ts = zip(*points)
        ax.plot(ns, ts, "o-", label=info.name.title(), color=COLORS[info.tag],
                linewidth=2.5, markersize=7, zorder=3)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input Size n")
    ax.set_ylabel("Mean Time (seconds)")
    ax.set_title("Scalability: Time vs Input Size", fontsize=18, pad=15)
    if ax.get_legend_handles_labels()[0]:
        ax.legend()
    ax.grid(True, which="both", zorder=0)
    return _finish(fig, ax, out_dir, "2_scalability.png")


def chart_properties(out_dir: str) -> str:
    """Table of the guarantees each algorithm makes."""
    fig, ax = plt.subplots(figsize=(10, 3.2))
    ax.axis("off")
    header = ["Code", "Algorithm", "Best", "Worst", "Stable", "In-place"]
    cells = [
        [str(info.code.value), info.name.title(), info.best_case, info.worst_case,
         "yes" if info.stable else "no", "yes" if info.in_place else "no"]
        for info in ALGORITHMS.values()
    ]
    table = ax.table(cellText=cells, colLabels=header, loc="center", cellLoc="center")
    table.auto_set_font_size(False)
    table.set_fontsize(11)
    table.scale(1, 1.6)
    for (r, c), cell in table.get_celld().items():
        cell.set_edgecolor(GRID_COLOR)
        cell.set_facecolor(CARD_COLOR if r else GRID_COLOR)
        cell.get_text().set_color(TEXT_COLOR)
    ax.set_title("Algorithm Properties", fontsize=18, pad=10)
    path = os.path.join(out_dir, "3_properties.png")
    fig.savefig(path)
    plt.close(fig)
    return path


def generate_charts(rows: List[Dict[str, Any]], out_dir: str) -> List[str]:
    os.makedirs(out_dir, exist_ok=True)
    setup_style()
    paths = [
        chart_timing(rows, out_dir),
        chart_scalability(rows, out_dir),
        chart_properties(out_dir),
    ]
    for i, path in enumerate(paths, 1):
        print(f"  ✓ Chart {i}: {os.path.basename(path)}")
    return paths


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate sorting benchmark charts")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Input sizes")
    parser.add_argument("--trials", type=int, default=3, help="Trials per size")
    parser.add_argument("--pattern", type=str, default="random", choices=sorted(PATTERNS))
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--out-dir", type=str, default="sort_charts", help="Output folder")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    args = parser.parse_args(argv)
    if any(n < 0 for n in args.sizes):
        parser.error("--sizes cannot be negative")
    configure_logging(args.log_level)

    print("Phase 1/2: Running Benchmarks...")
    rows = run_benchmark(args.sizes, args.trials, args.pattern, seed=args.seed, progress=True)

    print("\nPhase 2/2: Generating Charts...")
    generate_charts(rows, args.out_dir)
    print_summary(rows)
    print(f"All charts saved to: {args.out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
