# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/operator_record.py
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(slots=True, frozen=True)
class OperatorRecord:
    """
    A single Pauli operator read from one line of the input.

    Attributes
    ----------
    sequence_index : int
        1-based line number of the operator; the only ordering key used
        when the program is assembled
    pauli_string : str
        Pauli label over 'IXYZ', one character per qubit (leftmost is q[0])
    coefficient : float
        Non-zero real coefficient of the operator
    parameter_tag : int
        Parameter shared by dependent operators. A tag of 0 in the input is
        replaced by ``sequence_index`` so the operator gets its own parameter.
    """
    sequence_index: int
    pauli_string:   str
    coefficient:    float
    parameter_tag:  int

    def to_tuple(self) -> Tuple[int, str, float, int]:
        """Plain tuple form, used when records are shipped to worker processes."""
        return (self.sequence_index, self.pauli_string,
                self.coefficient, self.parameter_tag)

    @property
    def parameter_name(self) -> str:
        return f"param{self.parameter_tag}"


@dataclass(slots=True, frozen=True)
class ClassifiedOperator:
    """
    Pauli string split into 1-based qubit positions per Pauli axis.

    The three position tuples are ascending and pairwise disjoint; positions
    holding 'I' appear in none of them.
    """
    x_positions: Tuple[int, ...] = ()
    y_positions: Tuple[int, ...] = ()
    z_positions: Tuple[int, ...] = ()

    def by_axis(self) -> Tuple[Tuple[int, ...], ...]:
        """Position tuples in X, Y, Z order."""
        return (self.x_positions, self.y_positions, self.z_positions)

    @property
    def pivot(self) -> int:
        """
        Highest active qubit position, or 0 for an identity operator.

        The pivot is the target of the CNOT ladder and carries the Z rotation.
        """
        return max((max(p) for p in self.by_axis() if p), default=0)

    @property
    def is_identity(self) -> bool:
        return self.pivot == 0

    def weight(self) -> int:
        """Number of qubits the operator acts on non-trivially."""
        return sum(len(p) for p in self.by_axis())


@dataclass(slots=True)
class ParsedInput:
    """
    Result of parsing a whole input.

    Attributes
    ----------
    records : List[OperatorRecord]
        Operators ordered by ``sequence_index``
    qubit_count : int
        Length of the first Pauli string, shared by every record
    parameter_indices : List[int]
        Distinct parameter tags in order of first occurrence
    """
    records:           List[OperatorRecord] = field(default_factory=list)
    qubit_count:       int = 0
    parameter_indices: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)
