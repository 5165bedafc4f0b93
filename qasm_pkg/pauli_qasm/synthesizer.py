# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/synthesizer.py
"""
OpenQASM synthesis of a single Pauli rotation exp(-i*theta*P/2).

The fragment for one operator is built around a central Z rotation on the
pivot qubit (the highest active qubit):

- every active non-pivot qubit is rotated into the Z basis and entangled into
  the pivot with a CNOT before the central rotation, and disentangled and
  rotated back afterwards
- the pivot itself only gets its basis rotation pair, applied outermost so it
  precedes every CNOT that targets it

Notes
-----
- Basis changes are registered per Pauli axis in the BasisChange registry
- Gate text uses 0-based register indices (position p maps to q[p-1])
- The output text is fixed: gate names, angle signs and insertion order are
  part of the contract, not only the unitary they implement
"""

from collections import deque
from typing import Callable, Dict, Optional, Tuple

from .classifier import classify_pauli, PAULI_AXES
from .errors import TooManyBasisCategories
from .operator_record import OperatorRecord, ClassifiedOperator

__all__ = [
    "BasisChange",
    "DEFAULT_MULTIPLIER_LITERAL",
    "multiplier_literal",
    "rotation_angle",
    "synthesize_fragment",
    "synthesize_record",
]

DEFAULT_MULTIPLIER_LITERAL = "2*"


class BasisChange:
    """
    Registry of basis-change rules, one per Pauli axis.

    Each rule maps a 1-based qubit position to the pair of gate lines
    ``(before, after)`` that rotate the axis eigenbasis onto the Z eigenbasis
    and back. An empty pair means the axis is already diagonal.
    """
    _registry: Dict[str, Callable[[int], Tuple[str, str]]] = {}

    @classmethod
    def get(cls, axis: str) -> Callable[[int], Tuple[str, str]]:
        """
        Get the basis-change rule for a Pauli axis.

        Raises
        ------
        NotImplementedError
            If no rule is registered for the axis.
        """
        if axis not in cls._registry:
            raise NotImplementedError(f"No basis change for axis '{axis}'")
        return cls._registry[axis]

    @staticmethod
    def register_axis(axis: str):
        """
        Decorator to register a basis-change rule for ``axis``.

        Example
        -------
        @BasisChange.register_axis("X")
        def x_basis(qubit: int) -> Tuple[str, str]:
            ...
        """
        def decorator(func):
            BasisChange._registry[axis] = func
            return func
        return decorator


@BasisChange.register_axis("X")
def x_basis(qubit: int) -> Tuple[str, str]:
    return (f"ry(pi/2) q[{qubit - 1}];\n",
            f"ry(-pi/2) q[{qubit - 1}];\n")


@BasisChange.register_axis("Y")
def y_basis(qubit: int) -> Tuple[str, str]:
    return (f"rx(-pi/2) q[{qubit - 1}];\n",
            f"rx(pi/2) q[{qubit - 1}];\n")


@BasisChange.register_axis("Z")
def z_basis(qubit: int) -> Tuple[str, str]:
    return ("", "")


def _cx(control: int, target: int) -> str:
    return f"cx q[{control - 1}], q[{target - 1}];\n"


def multiplier_literal(multiplier: Optional[float] = None) -> str:
    """
    Literal prefix written in front of every rotation angle.

    Parameters
    ----------
    multiplier : float, optional
        Factor applied to every coefficient. None keeps the default factor 2.

    Returns
    -------
    str
        e.g. '2*' or '0.500000*'
    """
    if multiplier is None:
        return DEFAULT_MULTIPLIER_LITERAL
    return f"{multiplier:f}*"


def rotation_angle(record: OperatorRecord,
                   mup: str = DEFAULT_MULTIPLIER_LITERAL,
                   parameterize: bool = False) -> str:
    """Angle text of the central rotation, e.g. '2*0.5' or '2*0.5*param3'."""
    angle = f"{mup}{float(record.coefficient)!r}"
    if parameterize:
        angle += f"*{record.parameter_name}"
    return angle


def synthesize_fragment(record: OperatorRecord,
                        classified: ClassifiedOperator,
                        mup: str = DEFAULT_MULTIPLIER_LITERAL,
                        parameterize: bool = False) -> str:
    """
    Build the OpenQASM fragment realizing one Pauli rotation.

    Parameters
    ----------
    record : OperatorRecord
        Operator the fragment is built for
    classified : ClassifiedOperator
        Per-axis positions of ``record.pauli_string``
    mup : str
        Multiplier literal prefixed to the angle
    parameterize : bool
        Whether to scale the angle by the symbolic parameter of the record

    Returns
    -------
    str
        Fragment text, starting with a comment naming the input line.
        Empty for an identity operator.

    Raises
    ------
    TooManyBasisCategories
        If the classification holds more axes than X, Y and Z
    """
    pivot = classified.pivot
    if pivot == 0:
        return ""

    center = f"rz({rotation_angle(record, mup, parameterize)}) q[{pivot - 1}];\n"
    head = deque()
    tail = []
    pivot_before = pivot_after = ""

    for axis_idx, positions in enumerate(classified.by_axis()):
        if axis_idx >= len(PAULI_AXES):
            raise TooManyBasisCategories(record.sequence_index)
        basis = BasisChange.get(PAULI_AXES[axis_idx])

        for qubit in positions:
            before, after = basis(qubit)
            if qubit == pivot:
                # pivot is the CNOT target itself; its rotation wraps everything
                pivot_before, pivot_after = before, after
                continue
            cnot = _cx(qubit, pivot)
            head.appendleft(before + cnot)
            tail.append(cnot + after)

    header = f"\n// New operator from line {record.sequence_index}\n"
    return "".join([header, pivot_before, *head, center, *tail, pivot_after])


def synthesize_record(record: OperatorRecord,
                      mup: str = DEFAULT_MULTIPLIER_LITERAL,
                      parameterize: bool = False) -> str:
    """Classify and synthesize one record; the per-record unit of work."""
    classified = classify_pauli(record.pauli_string, record.sequence_index)
    return synthesize_fragment(record, classified, mup, parameterize)
