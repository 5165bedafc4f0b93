# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/utils.py
from __future__ import annotations
import random
from typing import List

__all__ = [
    "PAULI_SYMBOLS",
    "random_pauli_label",
    "random_operator_lines",
]

PAULI_SYMBOLS = "IXYZ"


def random_pauli_label(n: int, rng: random.Random | None = None) -> str:
    """
    Generate a random non-identity Pauli label of length n.

    Parameters
    ----------
    n : int
        Length of the Pauli label
    rng : random.Random, optional
        Source of randomness; the module-level generator if omitted

    Returns
    -------
    str
        Random Pauli label using symbols from "IXYZ", guaranteed to be non-identity

    Examples
    --------
    >>> label = random_pauli_label(3)
    >>> len(label)
    3
    >>> "X" in label or "Y" in label or "Z" in label
    True
    """
    rng = rng or random
    lbl = "".join(rng.choice(PAULI_SYMBOLS) for _ in range(n))
    if set(lbl) == {"I"}:
        pos = rng.randrange(n)
        lbl = lbl[:pos] + rng.choice("XYZ") + lbl[pos+1:]
    return lbl


def random_operator_lines(num_operators: int,
                          num_qubits: int,
                          seed: int | None = None,
                          shared_tags: bool = False) -> List[str]:
    """
    Generate a random input in the line-based operator format.

    Parameters
    ----------
    num_operators : int
        Number of lines
    num_qubits : int
        Length of every Pauli string
    seed : int, optional
        Seed for reproducible inputs
    shared_tags : bool
        If True, tags are drawn from a small pool so that operators share
        parameters; otherwise every tag is 0 (independent parameters)

    Returns
    -------
    List[str]
        Lines such as 'IXYZ -0.125 0'
    """
    rng = random.Random(seed)
    tag_pool = max(1, num_operators // 4)

    lines = []
    for _ in range(num_operators):
        label = random_pauli_label(num_qubits, rng)
        coeff = 0.0
        while coeff == 0.0:
            coeff = round(rng.uniform(-1.0, 1.0), 6)
        tag = rng.randint(1, tag_pool) if shared_tags else 0
        lines.append(f"{label} {coeff!r} {tag}")
    return lines
