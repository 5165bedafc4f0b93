# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/verification.py
"""
Numerical checks of generated programs against exact Pauli rotations.

These helpers load a program with qiskit, compute its unitary and compare it
with the ordered product of exp(-i*theta*s*P/2) built with scipy. They are
meant for tests and small inputs only (dense 2^n x 2^n matrices).

Notes
-----
- The basis rotations ry(pi/2) and rx(-pi/2) map X and Y onto -Z, so every
  X or Y factor flips the sign s of the generator (see ``basis_sign``)
- Pauli labels are reversed for qiskit, whose rightmost label char is qubit 0
"""

import numpy as np
import scipy.linalg
from qiskit import QuantumCircuit, qasm2
from qiskit.quantum_info import Operator, Pauli

from .classifier import classify_pauli
from .operator_record import ClassifiedOperator, ParsedInput
from .synthesizer import multiplier_literal

__all__ = [
    "program_to_circuit",
    "circuit_operator",
    "pauli_rotation_matrix",
    "basis_sign",
    "expected_operator",
    "programs_equivalent",
]


def program_to_circuit(program: str, version: int = 2) -> QuantumCircuit:
    """
    Load an OpenQASM program into a qiskit QuantumCircuit.

    Version 3 programs need the optional ``qiskit-qasm3-import`` package.
    """
    if version == 3:
        from qiskit import qasm3
        return qasm3.loads(program)
    return qasm2.loads(program)


def circuit_operator(circuit: QuantumCircuit) -> Operator:
    """Unitary of the quantum part of ``circuit``; classical registers are dropped."""
    bare = QuantumCircuit(circuit.num_qubits)
    q2i = {q: i for i, q in enumerate(circuit.qubits)}
    for instr in circuit.data:
        bare.append(instr.operation, [q2i[q] for q in instr.qubits])
    return Operator(bare)


def pauli_rotation_matrix(pauli_string: str, angle: float) -> np.ndarray:
    """
    Dense matrix of exp(-i * angle * P / 2).

    Parameters
    ----------
    pauli_string : str
        Pauli label with position 1 (leftmost) on qubit 0
    angle : float
        Rotation angle

    Returns
    -------
    np.ndarray
        2^n x 2^n complex unitary
    """
    p = Pauli(pauli_string[::-1]).to_matrix()
    return scipy.linalg.expm(-0.5j * angle * p)


def basis_sign(classified: ClassifiedOperator) -> int:
    """Sign of the generator realized by the fixed basis rotations."""
    return (-1) ** (len(classified.x_positions) + len(classified.y_positions))


def expected_operator(parsed: ParsedInput, multiplier: float | None = None) -> np.ndarray:
    """
    Ordered product of the rotations a program for ``parsed`` implements.

    Parameters
    ----------
    parsed : ParsedInput
        Parsed operators
    multiplier : float, optional
        Same multiplier the program was generated with

    Returns
    -------
    np.ndarray
        Unitary of the whole (unparameterized) program
    """
    factor = float(multiplier_literal(multiplier).rstrip("*"))
    dim = 2 ** parsed.qubit_count
    total = np.eye(dim, dtype=complex)

    for record in parsed.records:
        classified = classify_pauli(record.pauli_string, record.sequence_index)
        if classified.is_identity:
            continue
        angle = basis_sign(classified) * factor * record.coefficient
        total = pauli_rotation_matrix(record.pauli_string, angle) @ total
    return total


def programs_equivalent(program: str,
                        parsed: ParsedInput,
                        multiplier: float | None = None,
                        atol: float = 1e-8) -> bool:
    """Whether a version 2 program implements the rotations of ``parsed`` exactly."""
    actual = circuit_operator(program_to_circuit(program, version=2)).data
    return bool(np.allclose(actual, expected_operator(parsed, multiplier), atol=atol))
