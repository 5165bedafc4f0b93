# -*- coding: utf-8 -*-

"""
Check generated OpenQASM 2 programs against exact Pauli rotations.

Programs are loaded with qiskit and their unitary is compared with the
ordered product of exp(-i*theta*s*P/2) computed with scipy.
"""

import itertools
import numpy as np
import pytest
from math import pi
from qiskit.quantum_info import Operator

from pauli_qasm import QasmTranslator, parse_lines
from pauli_qasm.classifier import classify_pauli
from pauli_qasm.utils import random_operator_lines
from pauli_qasm.verification import (
    basis_sign,
    circuit_operator,
    expected_operator,
    pauli_rotation_matrix,
    program_to_circuit,
    programs_equivalent,
)

LABELS_2Q = ["".join(p) for p in itertools.product("IXYZ", repeat=2)]


def rz_matrix(theta):
    return np.array([[np.exp(-1j*theta/2), 0], [0, np.exp(1j*theta/2)]], dtype=complex)


@pytest.mark.parametrize("theta", [0.0, pi/4, pi/2, pi, 3*pi/2])
def test_pauli_rotation_matrix_z(theta):
    assert np.allclose(pauli_rotation_matrix("Z", theta), rz_matrix(theta))


def test_pauli_rotation_matrix_qubit_order():
    """Position 1 of the label acts on qubit 0 (qiskit little-endian)."""
    theta = 0.7
    expected = np.kron(np.eye(2), rz_matrix(theta))
    assert np.allclose(pauli_rotation_matrix("ZI", theta), expected)


@pytest.mark.parametrize("label,sign", [
    ("ZZ", 1), ("XZ", -1), ("YZ", -1), ("XY", 1), ("XXX", -1), ("III", 1),
])
def test_basis_sign(label, sign):
    assert basis_sign(classify_pauli(label, 1)) == sign


@pytest.mark.parametrize("label", LABELS_2Q)
@pytest.mark.parametrize("coeff", [0.3, -1.1])
def test_single_operator_unitary(label, coeff):
    """Exhaustively check every 2-qubit Pauli rotation."""
    lines = [f"{label} {coeff} 1"]
    qasm = QasmTranslator(strategy="sequential").translate_lines(lines)
    parsed = parse_lines(lines)

    assert programs_equivalent(qasm, parsed), f"Mismatch for {label} with coefficient {coeff}"


@pytest.mark.parametrize("trial", range(10))
def test_random_sums(trial):
    """Random Pauli sums on 2-4 qubits, compared as a whole program."""
    n = 2 + trial % 3
    lines = random_operator_lines(6, n, seed=trial + 100)
    multiplier = None if trial % 2 else 0.5

    qasm = QasmTranslator(strategy="threads", parallel_threshold=0,
                          multiplier=multiplier).translate_lines(lines)
    parsed = parse_lines(lines)

    actual = circuit_operator(program_to_circuit(qasm)).data
    expected = expected_operator(parsed, multiplier)
    assert np.allclose(actual, expected), f"Trial {trial}: program differs for {lines}"


def test_identity_program_is_identity():
    qasm = QasmTranslator().translate_lines(["II 1.0 1", "II -2.0 0"])
    op = circuit_operator(program_to_circuit(qasm))
    assert op.equiv(Operator(np.eye(4)))


def test_register_sizes():
    qasm = QasmTranslator().translate_lines(["XIZY 0.2 1"])
    circuit = program_to_circuit(qasm)
    assert circuit.num_qubits == 4
    assert circuit.num_clbits == 4
    assert dict(circuit.count_ops()) == {"ry": 2, "rx": 2, "cx": 4, "rz": 1}
