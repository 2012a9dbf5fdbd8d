#!/usr/bin/env python3
"""
Benchmarks for the ordered tree data structure.

This script measures:
 1. Tree build times for random insertion order
 2. Height growth for random vs. ascending insertion order
 3. Per-operation cost of search, insert and delete in trees of various sizes

Usage:
    python benchmarks.py [--sizes 100 1000 10000] [--trials T] [--seed S] [--degenerate]
"""
import argparse
import gc
import math
import random
import sys
import time
from statistics import mean, variance

from stats_ordered_tree import (
    random_keys,
    random_tree_of_size,
    degenerate_tree_of_size,
    log_stats,
)


def bench_build(sizes: list[int], seed: int) -> None:
    """Measure random_tree_of_size for various sizes."""
    for n in sizes:
        t0 = time.perf_counter()
        _ = random_tree_of_size(n, seed=seed)
        elapsed = time.perf_counter() - t0
        print(f"[bench] random_tree_of_size({n}): {elapsed:.4f}s")


def bench_height(sizes: list[int], seed: int, degenerate: bool) -> None:
    """Print the height of random trees next to log2(n); optionally of sorted-insert trees."""
    for n in sizes:
        tree = random_tree_of_size(n, seed=seed)
        print(f"[bench] height random({n}) = {tree.height():>6}   log2(n) = {math.log2(n):6.2f}")
        if degenerate:
            if n >= sys.getrecursionlimit():
                print(f"[bench] height ascending({n}) skipped: exceeds recursion limit")
                continue
            print(f"[bench] height ascending({n}) = {degenerate_tree_of_size(n).height():>6}")


def measure_operations(n: int, trials: int, seed: int) -> dict:
    """
    Measure per-operation cost on a tree of exactly `n` items, averaged over
    `trials` keys not yet in the tree.
    Returns {op: (mean_time_s, variance_time_s)}.
    """
    keys = random_keys(n + trials, seed=seed)
    tree_keys, probe_keys = keys[:n], keys[n:]
    tree = random_tree_of_size(0)
    for key in tree_keys:
        tree = tree.insert(key, f"val{key}")
    hits = random.Random(seed).sample(tree_keys, k=min(trials, n))

    results = {}
    gc.collect()
    gc.disable()
    try:
        for op, probe in (("search", hits), ("insert", probe_keys), ("delete", hits)):
            times = []
            for key in probe:
                t0 = time.perf_counter()
                if op == "search":
                    tree.search(key)
                elif op == "insert":
                    tree = tree.insert(key, f"val{key}")
                else:
                    tree = tree.delete(key)
                times.append(time.perf_counter() - t0)
            results[op] = (mean(times), variance(times) if len(times) > 1 else 0.0)
    finally:
        gc.enable()
    return results


def bench_operations(sizes: list[int], trials: int, seed: int) -> None:
    for n in sizes:
        for op, (avg, var) in measure_operations(n, trials, seed).items():
            print(
                f"[bench] {op:<6} size {n:<7} → avg {avg*1e6:8.2f} µs   σ²={var*1e12:8.2f} µs²"
            )


def main():
    parser = argparse.ArgumentParser(description="Ordered tree benchmarks")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 1000, 10000],
                        help="Tree sizes to benchmark")
    parser.add_argument("--trials", type=int, default=200,
                        help="Number of probe keys per operation")
    parser.add_argument("--seed", type=int, default=42,
                        help="Seed for key generation")
    parser.add_argument("--degenerate", action="store_true",
                        help="Also report heights of trees built from ascending keys")
    args = parser.parse_args()

    bench_build(args.sizes, args.seed)
    bench_height(args.sizes, args.seed, args.degenerate)
    bench_operations(args.sizes, args.trials, args.seed)
    log_stats(random_tree_of_size(max(args.sizes), seed=args.seed))


if __name__ == "__main__":
    main()
