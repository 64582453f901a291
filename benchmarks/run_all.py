#!/usr/bin/env python3
"""HostKeys benchmark runner.

Runs the benchmark suites and outputs results as JSON and markdown.
Results are saved to benchmarks/results/latest.json.

Usage:
    python -m benchmarks.run_all
    python benchmarks/run_all.py
"""

import json
import os
import platform
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

# Ensure the repo root is on sys.path so imports work
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))
sys.path.insert(0, str(REPO_ROOT))

from benchmarks import bench_keys

SUITES = [
    ("keys", "Key Operations", bench_keys),
]


def _system_info() -> dict:
    return {
        "platform": platform.platform(),
        "processor": platform.processor(),
        "python_version": platform.python_version(),
        "cpu_count": os.cpu_count(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def _format_number(n: float) -> str:
    """Format number with commas."""
    if n >= 1_000:
        return f"{n:,.0f}"
    if n >= 1:
        return f"{n:.2f}"
    return f"{n:.4f}"


def _generate_markdown(results: dict) -> str:
    """Generate a markdown summary table from results."""
    lines = [
        "# Benchmark Results",
        "",
        f"> Generated: {results['system']['timestamp']}",
        f"> Platform: {results['system']['platform']}",
        f"> Python: {results['system']['python_version']}",
        "",
        "| Suite | Benchmark | Ops/sec | p50 (ms) | p95 (ms) | p99 (ms) |",
        "|-------|-----------|---------|----------|----------|----------|",
    ]
    for key, label, _ in SUITES:
        for bench_name, data in results.get(key, {}).items():
            lines.append(
                f"| {label} | {bench_name} | {_format_number(data['ops_per_sec'])} "
                f"| {data['p50_ms']:.3f} | {data['p95_ms']:.3f} | {data['p99_ms']:.3f} |"
            )
    lines.extend(["", f"Total runtime: {results.get('total_seconds', 0):.1f}s"])
    return "\n".join(lines)


def main():
    print("=" * 60)
    print("  HostKeys Performance Benchmark Suite")
    print("=" * 60)

    results: dict = {"system": _system_info()}
    total_start = time.perf_counter()

    for key, label, module in SUITES:
        print(f"\n--- {label} ---")
        results[key] = module.run_all()

    total_seconds = time.perf_counter() - total_start
    results["total_seconds"] = total_seconds

    results_dir = Path(__file__).resolve().parent / "results"
    results_dir.mkdir(exist_ok=True)

    json_path = results_dir / "latest.json"
    with open(json_path, "w") as f:
        json.dump(results, f, indent=2, default=str)
    print(f"\nJSON results saved to {json_path}")

    print(f"\n{_generate_markdown(results)}")
    print(f"\n  Completed in {total_seconds:.1f}s")
    return results


if __name__ == "__main__":
    main()
