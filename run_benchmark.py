#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Benchmark of the translation strategies on random Pauli sums.

Usage: python run_benchmark.py [num_operators] [num_qubits] [repeats]
"""

import sys

from pauli_qasm.benchmark import benchmark_strategies
from pauli_qasm.utils import random_operator_lines


def main(num_operators=20_000, num_qubits=24, repeats=3):
    lines = random_operator_lines(num_operators, num_qubits, seed=1234)
    print(f"Benchmarking {num_operators} operators on {num_qubits} qubits, {repeats} repeats")

    results = benchmark_strategies(lines, repeats=repeats, parallel_threshold=0)

    print("=" * 72)
    print(f"{'strategy':<12}{'total [s]':>14}{'std [s]':>12}{'parse':>11}{'reduce':>11}{'assemble':>12}")
    for strategy, r in results.items():
        print(f"{strategy:<12}{r['mean']:>14.4f}{r['std']:>12.4f}"
              f"{r['parse']:>11.4f}{r['reduce']:>11.4f}{r['assemble']:>12.4f}")
    print("All strategies produced identical programs.")


if __name__ == "__main__":
    args = [int(a) for a in sys.argv[1:4]]
    main(*args)
