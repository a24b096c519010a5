#!/usr/bin/env python3
"""Midpoint micro-benchmarks.

Times each overload in isolation and reports throughput.

Usage:
    uv run python scripts/bench.py                  # all benchmarks
    uv run python scripts/bench.py numpy            # substring filter
    uv run python scripts/bench.py -n 10000         # fewer iterations
    uv run python scripts/bench.py --cprofile split # cProfile dump
"""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import sys
import time
from pathlib import Path
from typing import Any, Callable

# Add project to path so we can import without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

import numpy as np

from midpoint.floating import midpoint_float
from midpoint.formats import BINARY32
from midpoint.integer import midpoint_int
from midpoint.memory.address import midpoint_pointer
from midpoint.memory.span import Span
from midpoint.widths import INT64, UINT64

BASE = 0x8000_0000
MICRO_N = 200_000

# Operand pairs per benchmark. Each pair includes a near-overflow case.
CASES: dict[str, tuple[Any, Any, dict[str, Any]]] = {
    "int (python, int64)": (INT64.min, INT64.max, {}),
    "int (python, uint64)": (UINT64.max, 0, {"itype": UINT64}),
    "int (numpy int32, widened)": (np.int32(-(2 ** 31)), np.int32(2 ** 31 - 1), {}),
    "int (numpy uint64, split)": (np.uint64(UINT64.max), np.uint64(1), {}),
    "float (python)": (sys.float_info.max, sys.float_info.max, {}),
    "float (emulated binary32)": (BINARY32.max, BINARY32.max, {"fmt": BINARY32}),
    "float (numpy float32)": (np.finfo(np.float32).max, np.float32(1.0), {}),
}


def _callable_for(name: str) -> Callable[..., Any]:
    return midpoint_int if name.startswith("int") else midpoint_float


def bench_case(name: str, n: int = MICRO_N) -> dict[str, Any]:
    """Benchmark one operand pair from CASES."""
    a, b, kwargs = CASES[name]
    fn = _callable_for(name)
    start = time.perf_counter()
    for _ in range(n):
        fn(a, b, **kwargs)
    elapsed = time.perf_counter() - start
    return {"ops": n, "elapsed": elapsed, "ops_per_sec": n / elapsed if elapsed > 0 else 0}


def bench_pointer(n: int = MICRO_N) -> dict[str, Any]:
    """Benchmark midpoint_pointer between the ends of a 256K-element span."""
    span = Span(BASE, 256 * 1024, itemsize=4)
    a, b = span.begin(), span.end()
    start = time.perf_counter()
    for _ in range(n):
        midpoint_pointer(a, b)
    elapsed = time.perf_counter() - start
    return {"ops": n, "elapsed": elapsed, "ops_per_sec": n / elapsed if elapsed > 0 else 0}


BENCHMARKS: dict[str, Callable[[int], dict[str, Any]]] = {
    **{name: (lambda n, name=name: bench_case(name, n)) for name in CASES},
    "pointer (span)": bench_pointer,
}


def profile_report(fn: Callable[[int], dict[str, Any]], n: int, top_n: int = 20) -> str:
    """Profile one benchmark and return its hottest functions by own time."""
    profiler = cProfile.Profile()
    profiler.runcall(fn, n)
    out = io.StringIO()
    pstats.Stats(profiler, stream=out).sort_stats(pstats.SortKey.TIME).print_stats(top_n)
    return out.getvalue()


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

RATE_UNITS = ((1e9, "G"), (1e6, "M"), (1e3, "K"))


def fmt_rate(ops_per_sec: float) -> str:
    """Calls per second with a metric suffix, e.g. 1.25M."""
    for scale, suffix in RATE_UNITS:
        if ops_per_sec >= scale:
            return f"{ops_per_sec / scale:.2f}{suffix}"
    return f"{ops_per_sec:.0f}"


def print_micro_result(name: str, result: dict[str, Any]) -> None:
    """Print results for a micro-benchmark."""
    print(f"  {name:<28} {result['elapsed']:7.3f}s  "
          f"{fmt_rate(result['ops_per_sec']):>8}/s  "
          f"({result['ops']:,} ops)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark the midpoint overloads")
    parser.add_argument("benchmark", nargs="?", default=None,
                        help="Run benchmarks matching this substring")
    parser.add_argument("-n", "--iterations", type=int, default=MICRO_N,
                        help=f"Calls per benchmark (default {MICRO_N:,})")
    parser.add_argument("--cprofile", action="store_true",
                        help="Run under cProfile and print hot functions")
    args = parser.parse_args(argv)

    if args.benchmark:
        selected = {k: v for k, v in BENCHMARKS.items()
                    if args.benchmark.lower() in k.lower()}
        if not selected:
            print(f"No benchmark matching '{args.benchmark}'")
            print(f"Available: {', '.join(BENCHMARKS)}")
            sys.exit(1)
    else:
        selected = BENCHMARKS

    print("Micro-benchmarks (one call per iteration)")
    print("-" * 65)
    for name, fn in selected.items():
        if args.cprofile:
            print(f"\ncProfile: {name}")
            print("=" * 65)
            print(profile_report(fn, args.iterations))
        else:
            print_micro_result(name, fn(args.iterations))
    print()


if __name__ == "__main__":
    main()
