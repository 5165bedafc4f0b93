# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/config.py
from dataclasses import dataclass
from typing import Optional

from .synthesizer import multiplier_literal

__all__ = [
    "TranslationConfig",
    "SUPPORTED_VERSIONS",
    "STRATEGIES",
]

# Threshold for parallel processing and maximum number of workers
_PARALLEL_THRESHOLD = 256
_MAX_WORKERS = 8 # or os.cpu_count()

SUPPORTED_VERSIONS = (2, 3)
STRATEGIES = ("sequential", "threads", "processes")


@dataclass(slots=True)
class TranslationConfig:
    """
    Options of one translation.

    Attributes
    ----------
    version : int
        OpenQASM major version of the output, 2 or 3
    strategy : str
        How per-operator fragments are computed: 'sequential', 'threads'
        or 'processes'. The output never depends on it.
    parameterize : bool
        Scale every rotation by a symbolic ``param<tag>`` input.
        Requires version 3.
    multiplier : float | None
        Factor written in front of every coefficient; None keeps the
        default factor 2
    max_workers : int
        Upper bound on parallel workers
    parallel_threshold : int
        Inputs with fewer operators than this run sequentially
    show_progress : bool
        Show a tqdm progress bar while fragments are collected
    verbose : bool
        Print status lines while translating
    """
    version:            int = 2
    strategy:           str = "threads"
    parameterize:       bool = False
    multiplier:         Optional[float] = None
    max_workers:        int = _MAX_WORKERS
    parallel_threshold: int = _PARALLEL_THRESHOLD
    show_progress:      bool = False
    verbose:            bool = False

    def __post_init__(self):
        if self.version not in SUPPORTED_VERSIONS:
            raise ValueError(f"Unsupported OpenQASM version {self.version!r}, "
                             f"expected one of {SUPPORTED_VERSIONS}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {self.strategy!r}, "
                             f"expected one of {STRATEGIES}")
        if self.max_workers < 1:
            raise ValueError("max_workers must be positive")
        if self.parallel_threshold < 0:
            raise ValueError("parallel_threshold must be non-negative")
        # input declarations only exist in OpenQASM 3
        if self.parameterize and self.version != 3:
            raise ValueError("Parameterization requires OpenQASM version 3")

    @property
    def multiplier_literal(self) -> str:
        return multiplier_literal(self.multiplier)
