"""Print a table of saved structval benchmark results."""
from __future__ import annotations

import json
from pathlib import Path

_RESULT_FILES = [
    "equal_throughput_baseline.json",
    "hash_throughput_baseline.json",
    "format_throughput_baseline.json",
    "latency_baseline.json",
    "memory_baseline.json",
]

_SCRIPTS = ["bench_throughput.py", "bench_latency.py", "bench_memory.py"]


def _load(path: Path) -> dict[str, object] | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)  # type: ignore[return-value]


def _cell(value: float, template: str) -> str:
    return template.format(value) if value > 0 else "n/a"


def main() -> None:
    results_dir = Path(__file__).parent / "results"

    print(f"\n{'=' * 80}")
    print("  structval benchmark results")
    print(f"{'=' * 80}")
    print(f"{'Operation':<34} {'Ops/sec':>11} {'Avg':>11} {'p95':>10} {'Peak Mem':>10}")
    print("-" * 80)

    for fname in _RESULT_FILES:
        data = _load(results_dir / fname)
        if data is None:
            print(f"  (no results for {fname}; run the benchmark first)")
            continue
        operation = str(data.get("operation", fname))
        ops = _cell(float(data.get("ops_per_second", 0)), "{:,.0f}")  # type: ignore[arg-type]
        avg = _cell(float(data.get("avg_latency_ms", 0)), "{:.3f}ms")  # type: ignore[arg-type]
        p95 = _cell(float(data.get("p95_ms", 0)), "{:.3f}ms")  # type: ignore[arg-type]
        mem = _cell(float(data.get("peak_memory_kb", 0)), "{:,.0f}KB")  # type: ignore[arg-type]
        print(f"{operation:<34} {ops:>11} {avg:>11} {p95:>10} {mem:>10}")

    print(f"{'=' * 80}")
    print("  Run all benchmarks:")
    for script in _SCRIPTS:
        print(f"    python benchmarks/{script}")
    print(f"{'=' * 80}")


if __name__ == "__main__":
    main()
