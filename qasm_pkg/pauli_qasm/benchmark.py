# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/benchmark.py
"""
Wall-clock benchmarks of the translation strategies.

Each strategy runs the same parse -> reduce -> assemble pipeline; only the
way fragments are scheduled differs. Every benchmark run also checks that all
strategies produce byte-identical programs.
"""

import time
from typing import Dict, Iterable, List, Sequence

import numpy as np

from .assembler import assemble_program
from .config import TranslationConfig, STRATEGIES
from .line_parser import parse_lines
from .reducer import reduce_fragments

__all__ = [
    "time_phases",
    "benchmark_strategies",
]


def time_phases(lines: Sequence[str], config: TranslationConfig) -> Dict[str, float]:
    """
    Time the phases of one translation.

    Parameters
    ----------
    lines : Sequence[str]
        Input lines
    config : TranslationConfig
        Translation options, including the strategy

    Returns
    -------
    Dict[str, float]
        Seconds spent in 'parse', 'reduce', 'assemble' and 'total', plus the
        program itself under 'qasm'
    """
    t0 = time.perf_counter()
    parsed = parse_lines(lines)
    t1 = time.perf_counter()
    fragments = reduce_fragments(parsed.records,
                                 mup=config.multiplier_literal,
                                 parameterize=config.parameterize,
                                 strategy=config.strategy,
                                 max_workers=config.max_workers,
                                 parallel_threshold=config.parallel_threshold)
    t2 = time.perf_counter()
    qasm = assemble_program(parsed.qubit_count, config.version, config.parameterize,
                            parsed.parameter_indices, fragments)
    t3 = time.perf_counter()

    return {"parse": t1 - t0,
            "reduce": t2 - t1,
            "assemble": t3 - t2,
            "total": t3 - t0,
            "qasm": qasm}


def benchmark_strategies(lines: Sequence[str],
                         strategies: Iterable[str] = STRATEGIES,
                         repeats: int = 3,
                         **config_kwargs) -> Dict[str, Dict[str, float]]:
    """
    Benchmark several strategies on the same input.

    Parameters
    ----------
    lines : Sequence[str]
        Input lines
    strategies : Iterable[str]
        Strategies to compare
    repeats : int
        Runs per strategy
    **config_kwargs
        Other TranslationConfig fields, shared by every strategy

    Returns
    -------
    Dict[str, Dict[str, float]]
        Per strategy: mean and std of the total time, and mean time of each
        phase, in seconds

    Raises
    ------
    RuntimeError
        If two strategies produce different programs
    """
    if repeats < 1:
        raise ValueError("repeats must be positive")

    results: Dict[str, Dict[str, float]] = {}
    reference = None

    for strategy in strategies:
        config = TranslationConfig(strategy=strategy, **config_kwargs)
        runs: List[Dict[str, float]] = [time_phases(lines, config) for _ in range(repeats)]

        for run in runs:
            if reference is None:
                reference = run["qasm"]
            elif run["qasm"] != reference:
                raise RuntimeError(f"Strategy '{strategy}' produced a different program")

        totals = np.array([run["total"] for run in runs])
        results[strategy] = {"mean": float(totals.mean()),
                             "std": float(totals.std()),
                             "parse": float(np.mean([run["parse"] for run in runs])),
                             "reduce": float(np.mean([run["reduce"] for run in runs])),
                             "assemble": float(np.mean([run["assemble"] for run in runs]))}
    return results
