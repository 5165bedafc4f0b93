# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/classifier.py
from .errors import UnsupportedCharacter
from .operator_record import ClassifiedOperator

__all__ = ["classify_pauli", "PAULI_AXES"]

PAULI_AXES = ("X", "Y", "Z")


def classify_pauli(pauli_string: str, sequence_index: int) -> ClassifiedOperator:
    """
    Split a Pauli string into the 1-based qubit positions of each axis.

    Positions are collected left to right, so each tuple is ascending.
    'I' contributes nothing.

    Parameters
    ----------
    pauli_string : str
        Pauli label, e.g. 'IXYZ'
    sequence_index : int
        Input line the string was read from, used in error messages

    Returns
    -------
    ClassifiedOperator
        X, Y and Z positions of the operator

    Raises
    ------
    UnsupportedCharacter
        If the string contains a symbol outside 'IXYZ'
    """
    positions = {axis: [] for axis in PAULI_AXES}
    for pos, ch in enumerate(pauli_string, start=1):
        if ch == "I":
            continue
        if ch not in positions:
            raise UnsupportedCharacter(sequence_index)
        positions[ch].append(pos)

    return ClassifiedOperator(tuple(positions["X"]),
                              tuple(positions["Y"]),
                              tuple(positions["Z"]))
