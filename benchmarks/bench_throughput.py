"""Benchmark: structural equality, hashing and formatting throughput.

Measures how many deep-equality, hash and canonical-format operations can
complete per second on a nested document using the public structval API.
"""
from __future__ import annotations

import json
import sys
import time
from collections.abc import Callable
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import structval
from structval import Pair

_ITERATIONS: int = 5_000


def _sample_document(variant: type = list) -> object:
    return {
        "id": 42,
        "owner": None,
        "lines": variant(Pair(f"sku-{i}", variant([i, i * 2, None])) for i in range(10)),
        "tags": variant(["a", "b", "c"]),
    }


_LEFT = _sample_document(list)
_RIGHT = _sample_document(tuple)


def _run(operation: str, fn: Callable[[], object]) -> dict[str, object]:
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        fn()
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": operation,
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_equal_throughput() -> dict[str, object]:
    """Benchmark deep equality of a list-based and a tuple-based document.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _run("structval_equal_throughput", lambda: structval.equal(_LEFT, _RIGHT))


def bench_hash_throughput() -> dict[str, object]:
    """Benchmark hash contributions of a nested document."""
    return _run("structval_hash_throughput", lambda: structval.hash_of(_LEFT))


def bench_format_throughput() -> dict[str, object]:
    """Benchmark canonical formatting of a nested document."""
    return _run("structval_format_throughput", lambda: structval.format_value(_LEFT))


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_equal_throughput, "equal_throughput_baseline.json"),
        (bench_hash_throughput, "hash_throughput_baseline.json"),
        (bench_format_throughput, "format_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
