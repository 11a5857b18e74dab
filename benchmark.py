#!/usr/bin/env python3
"""
Measure the overhead of context inference relative to parsing itself.

Classification and pluck-path resolution only look at a fixed prefix of the
input, so their cost should stay flat as inputs grow while parse time grows.
"""

from __future__ import annotations

import argparse
import time

from justhtml_inference import InferenceParser, get_policy

SAMPLES = {
    "cells": "<td>cell</td>",
    "rows": "<tr><td>a</td><td>b</td></tr>",
    "body": "<div><p>paragraph <b>bold</b></p></div>",
    "document": "<!DOCTYPE html><html><head><title>t</title></head><body><p>x</p></body></html>",
}


def _time(fn, text: str, iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(iterations):
        fn(text)
    return time.perf_counter() - start


def run(parser: InferenceParser, size: int, iterations: int) -> list[tuple[str, float, float, float]]:
    results = []
    for name, unit in SAMPLES.items():
        text = unit if name == "document" else unit * size
        classify_s = _time(parser.context, text, iterations)
        pluck_s = _time(parser.pluck_path, text, iterations)
        parse_s = _time(parser.parse, text, iterations)
        results.append((name, classify_s, pluck_s, parse_s))
    return results


def print_results(results: list[tuple[str, float, float, float]], size: int, iterations: int) -> None:
    print(f"\n{'sample':<10} {'classify':>12} {'pluck':>12} {'parse':>12} {'overhead':>10}")
    print("-" * 60)
    for name, classify_s, pluck_s, parse_s in results:
        overhead = (classify_s + pluck_s) / parse_s * 100 if parse_s else 0.0
        print(
            f"{name:<10} {classify_s / iterations * 1e6:>10.2f}us {pluck_s / iterations * 1e6:>10.2f}us "
            f"{parse_s / iterations * 1e6:>10.2f}us {overhead:>9.2f}%"
        )
    print(f"\n{iterations} iterations, fragments repeated {size}x")


def main():
    parser = argparse.ArgumentParser(description="Benchmark context inference overhead")
    parser.add_argument("--size", type=int, default=200, help="Repetitions of each fragment sample")
    parser.add_argument("--iterations", type=int, default=100, help="Timed calls per sample")
    parser.add_argument("--policy", default="body", help="Context policy name")
    args = parser.parse_args()

    results = run(InferenceParser(get_policy(args.policy)), args.size, args.iterations)
    print_results(results, args.size, args.iterations)


if __name__ == "__main__":
    main()
