# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/assembler.py
from typing import Iterable, Mapping

__all__ = [
    "program_header",
    "parameter_declarations",
    "assemble_program",
]

_HEADERS = {
    2: ('OPENQASM 2.0;\n'
        'include "qelib1.inc";\n'
        'qreg q[{0}];\n'
        'creg c[{0}];\n'),
    3: ('OPENQASM 3.0;\n'
        'include "stdgates.inc";\n'
        'qubit[{0}] q;\n'
        'bit[{0}] c;\n'),
}


def program_header(qubit_count: int, version: int = 2) -> str:
    """
    Version preamble plus quantum and classical registers of ``qubit_count`` bits.

    Raises
    ------
    ValueError
        If ``version`` is not 2 or 3
    """
    if version not in _HEADERS:
        raise ValueError(f"Unsupported OpenQASM version {version!r}")
    return _HEADERS[version].format(qubit_count)


def parameter_declarations(parameter_indices: Iterable[int]) -> str:
    """One OpenQASM 3 ``input float param<tag>;`` line per parameter tag."""
    return "".join(f"input float param{tag};\n" for tag in parameter_indices)


def assemble_program(qubit_count: int,
                     version: int,
                     parameterize: bool,
                     parameter_indices: Iterable[int],
                     fragments: Mapping[int, str]) -> str:
    """
    Concatenate header, parameter declarations and fragments into a program.

    Fragments are emitted in ascending key order. They are not checked;
    identity operators simply contribute an empty string.

    Parameters
    ----------
    qubit_count : int
        Register size
    version : int
        OpenQASM major version, 2 or 3
    parameterize : bool
        Whether to declare the symbolic parameters
    parameter_indices : Iterable[int]
        Distinct parameter tags in order of first occurrence
    fragments : Mapping[int, str]
        Fragment text keyed by ``sequence_index``

    Returns
    -------
    str
        Complete OpenQASM program
    """
    parts = [program_header(qubit_count, version)]
    if parameterize:
        parts.append(parameter_declarations(parameter_indices))
    parts.extend(fragments[idx] for idx in sorted(fragments))
    return "".join(parts)
