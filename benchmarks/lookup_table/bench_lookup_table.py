"""Benchmarks for lookup table construction and application.

Times the forward table, single candidate tables, the full search and the
table lookups against evaluating the transfer function directly.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import numpy as np
import torch

import srgblut.lookup_table as L
from srgblut.color import srgb_linear_to_srgb


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 1,
    iterations: int = 5,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 1.
    iterations : int, optional
        Number of timed iterations. Default is 5.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics ``mean``, ``std``, ``min`` and
        ``max`` in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(
    name: str,
    result: dict[str, float],
    baseline: dict[str, float] | None = None,
    baseline_name: str = "direct",
) -> None:
    """Print benchmark results, with speedup against a baseline if given."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  srgblut: {format_time(result['mean'])} +/- {format_time(result['std'])}"
    )
    if baseline is not None:
        print(
            f"  {baseline_name}:  {format_time(baseline['mean'])} +/- {format_time(baseline['std'])}"
        )
        speedup = baseline["mean"] / result["mean"]
        if speedup >= 1:
            print(f"  Speedup: {speedup:.2f}x faster")
        else:
            print(f"  Speedup: {1 / speedup:.2f}x slower")


def run_benchmarks() -> None:
    print_result("srgb_to_linear_table", benchmark(L.srgb_to_linear_table))

    for shift in (5, 4, 0):
        print_result(
            f"linear_to_srgb_candidate(shift={shift})",
            benchmark(L.linear_to_srgb_candidate, shift, 0),
        )

    print_result(
        "linear_to_srgb_table",
        benchmark(L.linear_to_srgb_table, warmup=0, iterations=1),
    )

    table = L.linear_to_srgb_table()
    samples = torch.randint(0, 65536, (1920 * 1080 * 3,))
    print_result(
        "linear_to_srgb (1080p RGB)",
        benchmark(L.linear_to_srgb, samples, table),
        benchmark(
            lambda x: torch.round(
                srgb_linear_to_srgb(x.to(torch.float32) / 65535) * 255
            ).to(torch.uint8),
            samples,
        ),
    )

    codes = torch.randint(0, 256, (1920 * 1080 * 3,), dtype=torch.uint8)
    forward = L.srgb_to_linear_table()
    print_result(
        "srgb_to_linear (1080p RGB)",
        benchmark(L.srgb_to_linear, codes, forward),
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("Running CPU benchmarks...\n")
    run_benchmarks()
