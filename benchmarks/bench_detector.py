"""Detector benchmark.

Measures latency of contains_sensitive_arguments() across input categories:

  1. Clean command lines (every pattern is checked) — worst case per length
  2. Flagged command lines (early and late matches in pattern order)
  3. Absent / empty input

Target: p99 < 0.1ms for command lines up to 4096 chars.

Usage (from project root):
    python benchmarks/bench_detector.py [--iterations N]
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any

from argguard.detector import contains_sensitive_arguments

# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

CLEAN_SHORT = "install mypackage -version 1.0.0 -y"
CLEAN_LONG = ("install " + " ".join(f"package{i}" for i in range(500)))[:4096]
EARLY_MATCH = "install app --install-arguments-sensitive=\"/KEY=1\""
LATE_MATCH = "source add -n internal --user=admin"

P99_TARGET_MS: float = 0.1


def measure_p99(fn: Any, *args: Any, n: int = 10_000) -> tuple[float, float, float]:
    """Run fn(*args) n times and return (p50, p99, max) in milliseconds."""
    latencies: list[float] = []
    for _ in range(n):
        start = time.perf_counter()
        fn(*args)
        latencies.append((time.perf_counter() - start) * 1_000)
    latencies.sort()
    return latencies[int(0.50 * n)], latencies[int(0.99 * n)], latencies[-1]


def run_benchmarks(iterations: int) -> bool:
    """Run all scenarios. Returns True if every p99 is under target."""
    warmup = iterations // 10

    print("=" * 70)
    print("argguard contains_sensitive_arguments() benchmark")
    print(f"Warmup: {warmup} calls | Measurement: {iterations} calls each")
    print("=" * 70)

    scenarios = [
        (f"Clean short ({len(CLEAN_SHORT)} chars)", CLEAN_SHORT),
        (f"Clean long ({len(CLEAN_LONG)} chars)", CLEAN_LONG),
        ("Flagged, first pattern", EARLY_MATCH),
        ("Flagged, last pattern", LATE_MATCH),
        ("Absent (None)", None),
    ]

    all_pass = True
    for name, text in scenarios:
        for _ in range(warmup):
            contains_sensitive_arguments(text)

        p50, p99, worst = measure_p99(contains_sensitive_arguments, text, n=iterations)
        passed = p99 <= P99_TARGET_MS
        all_pass = all_pass and passed
        status = "PASS" if passed else "FAIL"
        print(f"  [{status}] {name}")
        print(f"          p50={p50:.4f}ms  p99={p99:.4f}ms  worst={worst:.4f}ms")

    print("=" * 70)
    print("RESULT: " + ("ALL BENCHMARKS PASSED" if all_pass else "SOME BENCHMARKS FAILED"))
    print("=" * 70)
    return all_pass


def main() -> int:
    parser = argparse.ArgumentParser(description="argguard detector latency benchmark")
    parser.add_argument("--iterations", type=int, default=10_000)
    args = parser.parse_args()
    return 0 if run_benchmarks(args.iterations) else 1


if __name__ == "__main__":
    sys.exit(main())
