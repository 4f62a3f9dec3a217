"""
Sort Benchmark
==============
Times every algorithm on identical inputs across a range of sizes.

Each trial builds one input list and hands an isolated copy to every
algorithm, so all of them sort exactly the same data.  Quadratic algorithms
are skipped above a size cap (their cells are left empty) to keep large runs
finishing in reasonable time.

Run:  sortsuite-bench --sizes 100 1000 5000 --trials 3 --output results.csv
"""

from __future__ import annotations

import argparse
import csv
import logging
import random
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from .algorithms import ALGORITHMS, SortAlgorithm, merge_sort
from .config import configure_logging, resolve_max_bench_size, resolve_seed
from .engine import SortEngine
from .generators import PATTERNS, generate

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [100, 500, 1000]


def run_single_trial(
    trial_id: int,
    n: int,
    pattern: str = "random",
    algorithms: Optional[Sequence[SortAlgorithm]] = None,
    rng: Optional[random.Random] = None,
    max_quadratic_size: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Sort one generated input with every requested algorithm.

    Returns a flat row: ``<tag>_time`` in seconds (None when skipped) and
    ``<tag>_sorted`` for each algorithm.
    """
    algorithms = list(algorithms) if algorithms else list(ALGORITHMS)
    cap = resolve_max_bench_size(max_quadratic_size)
    base = generate(pattern, n, rng)

    row: Dict[str, Any] = {"trial_id": trial_id, "pattern": pattern, "size": n}
    for code in algorithms:
        info = ALGORITHMS[code]
        if info.quadratic and n > cap:
            logger.debug("skipping %s at n=%d (cap %d)", info.name, n, cap)
            row[f"{info.tag}_time"] = None
            row[f"{info.tag}_sorted"] = None
            continue

        engine = SortEngine(list(base))
        row[f"{info.tag}_time"] = engine.run(code)
        row[f"{info.tag}_sorted"] = engine.is_sorted()
        if not row[f"{info.tag}_sorted"]:
            logger.error("%s produced unsorted output at n=%d", info.name, n)
    return row


def run_benchmark(
    sizes: Sequence[int] = DEFAULT_SIZES,
    trials: int = 3,
    pattern: str = "random",
    algorithms: Optional[Sequence[SortAlgorithm]] = None,
    seed: Optional[int] = None,
    max_quadratic_size: Optional[int] = None,
    progress: bool = False,
) -> List[Dict[str, Any]]:
    rng = random.Random(resolve_seed(seed))
    rows = []
    total = len(sizes) * trials
    done = 0
    for n in sizes:
        for t in range(trials):
            done += 1
            if progress:
                print(f"  [{done}/{total}] n={n} trial {t + 1}/{trials} ...", end="\r")
            rows.append(run_single_trial(done, n, pattern, algorithms, rng, max_quadratic_size))
    if progress:
        print()
    return rows


def growth_exponent(sizes: Sequence[float], times: Sequence[float]) -> Optional[float]:
    """
    Slope of log(time) against log(n).

    Roughly 1 for linear growth, 2 for quadratic.  None when fewer than two
    usable points (n > 1, time > 0) are available.
    """
    points = [(n, t) for n, t in zip(sizes, times) if n > 1 and t is not None and t > 0]
    if len({n for n, _ in points}) < 2:
        return None
    xs = np.log([n for n, _ in points])
    ys = np.log([t for _, t in points])
    slope, _ = np.polyfit(xs, ys, 1)
    return float(slope)


def summarize(
    rows: List[Dict[str, Any]],
    algorithms: Optional[Sequence[SortAlgorithm]] = None,
) -> List[Dict[str, Any]]:
    """Per-algorithm aggregates over all rows that actually ran it."""
    algorithms = list(algorithms) if algorithms else list(ALGORITHMS)
    stats = []
    for code in algorithms:
        info = ALGORITHMS[code]
        ran = [r for r in rows if r.get(f"{info.tag}_time") is not None]
        times = [r[f"{info.tag}_time"] for r in ran]

        by_size = defaultdict(list)
        for r in ran:
            by_size[r["size"]].append(r[f"{info.tag}_time"])
        sizes = list(by_size)
        mean_by_size = [float(np.mean(by_size[n])) for n in sizes]

        stats.append({
            "tag": info.tag,
            "name": info.name,
            "runs": len(ran),
            "skipped": len(rows) - len(ran),
            "mean_time": float(np.mean(times)) if times else None,
            "median_time": float(np.median(times)) if times else None,
            "success_rate": 100.0 * sum(1 for r in ran if r[f"{info.tag}_sorted"]) / len(ran) if ran else None,
            "growth": growth_exponent(sizes, mean_by_size),
        })
    return stats


def write_csv(rows: List[Dict[str, Any]], path: str) -> None:
    if not rows:
        logger.warning("no benchmark rows to write to %s", path)
        return
    keys = rows[0].keys()
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(rows)


def print_summary(rows: List[Dict[str, Any]], algorithms: Optional[Sequence[SortAlgorithm]] = None) -> None:
    """Print a summary table, fastest algorithm first."""
    stats = merge_sort(
        summarize(rows, algorithms),
        key=lambda s: (s["mean_time"] is None, s["mean_time"] or 0.0),
    )

    print("\nSummary Statistics:")
    print(f"{'Algorithm':<16} | {'Runs':>5} | {'Sorted':>7} | {'Mean (s)':>10} | {'Median (s)':>10} | {'Growth':>6}")
    print("-" * 72)
    for s in stats:
        if s["mean_time"] is None:
            print(f"{s['name']:<16} | {0:>5} | {'-':>7} | {'skipped':>10} | {'-':>10} | {'-':>6}")
            continue
        growth = f"{s['growth']:.2f}" if s["growth"] is not None else "-"
        print(f"{s['name']:<16} | {s['runs']:>5} | {s['success_rate']:>6.1f}% | "
              f"{s['mean_time']:>10.6f} | {s['median_time']:>10.6f} | {growth:>6}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark the sorting algorithms")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Input sizes")
    parser.add_argument("--trials", type=int, default=3, help="Trials per size")
    parser.add_argument("--pattern", type=str, default="random", choices=sorted(PATTERNS),
                        help="Input pattern")
    parser.add_argument("--algorithms", type=int, nargs="+", default=None,
                        choices=[int(code) for code in ALGORITHMS],
                        help="Algorithm codes to include (default: all)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-quadratic-size", type=int, default=None,
                        help="Skip bubble/selection/insertion above this n")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if any(n < 0 for n in args.sizes):
        parser.error("--sizes cannot be negative")
    if args.max_quadratic_size is not None and args.max_quadratic_size <= 0:
        parser.error("--max-quadratic-size must be a positive integer")
    configure_logging(args.log_level)
    algorithms = [SortAlgorithm(code) for code in args.algorithms] if args.algorithms else None

    print(f"Starting Benchmark: sizes={args.sizes}, {args.trials} trials, pattern={args.pattern}")
    rows = run_benchmark(args.sizes, args.trials, args.pattern, algorithms,
                         args.seed, args.max_quadratic_size, progress=True)
    print("Benchmark Complete!")

    write_csv(rows, args.output)
    print(f"Results saved to {args.output}")
    print_summary(rows, algorithms)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
