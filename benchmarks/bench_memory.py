"""Benchmark: memory retained by the pair detector's shape cache.

Classifying many distinct types grows the cache by one entry per type;
classifying the same types again must not allocate further entries.
"""
from __future__ import annotations

import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from structval import PairDetector

_SHAPES: int = 500
_ITERATIONS: int = 20


def bench_detector_memory() -> dict[str, object]:
    """Benchmark memory growth while a detector classifies many shapes.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb,
    cached_shapes.
    """
    shapes = [type(f"Shape{i}", (), {}) for i in range(_SHAPES)]
    values = [shape() for shape in shapes]
    detector = PairDetector()

    tracemalloc.start()
    snapshot_before = tracemalloc.take_snapshot()

    for _ in range(_ITERATIONS):
        for value in values:
            detector.detect(value)

    snapshot_after = tracemalloc.take_snapshot()
    tracemalloc.stop()

    stats = snapshot_after.compare_to(snapshot_before, "lineno")
    total_bytes = sum(stat.size_diff for stat in stats if stat.size_diff > 0)
    peak_kb = round(total_bytes / 1024, 2)

    result: dict[str, object] = {
        "operation": "structval_detector_memory",
        "iterations": _ITERATIONS,
        "peak_memory_kb": peak_kb,
        "current_memory_kb": peak_kb,
        "cached_shapes": len(detector.cache),
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(
        f"[bench_memory] {result['operation']}: peak {peak_kb:.2f} KB, "
        f"{result['cached_shapes']} cached shapes"
    )
    return result


if __name__ == "__main__":
    result = bench_detector_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
