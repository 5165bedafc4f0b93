# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/line_parser.py
"""
Parsing and validation of the line-based operator format.

Each line holds ``<pauli_string> <coefficient> <parameter_tag>``. The first
line fixes the number of qubits; every later line must match it. Parsing is
fail-fast: the first invalid line aborts the whole input.
"""

import math
import re
from typing import Iterable, Optional

from .errors import (
    MalformedLine,
    QubitCountMismatch,
    ZeroCoefficient,
    InvalidParameterTag,
)
from .operator_record import OperatorRecord, ParsedInput

__all__ = [
    "parse_line",
    "parse_lines",
    "MAX_PARAMETER_TAG",
]

# Largest tag accepted, one below the unsigned 64-bit maximum
MAX_PARAMETER_TAG = 2**64 - 2

_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_RE   = re.compile(r"[+-]?\d+")


def parse_line(line: str, sequence_index: int, qubit_count: Optional[int]) -> OperatorRecord:
    """
    Parse one input line into an OperatorRecord.

    Parameters
    ----------
    line : str
        Raw line text
    sequence_index : int
        1-based line number
    qubit_count : int or None
        Established number of qubits (length of the first Pauli string).
        None for the first line, which establishes it.

    Returns
    -------
    OperatorRecord
        Validated record; a tag of 0 is replaced by ``sequence_index``

    Raises
    ------
    MalformedLine
        Wrong number of fields, a field of the wrong type, or a coefficient
        too large to represent
    QubitCountMismatch
        Pauli string length differs from ``qubit_count``
    ZeroCoefficient
        Coefficient equals zero
    InvalidParameterTag
        Tag is negative or out of the representable range
    """
    fields = line.split()
    if len(fields) != 3:
        raise MalformedLine(sequence_index)
    pauli_string, coef_text, tag_text = fields

    if not _FLOAT_RE.fullmatch(coef_text) or not _INT_RE.fullmatch(tag_text):
        raise MalformedLine(sequence_index)
    coefficient = float(coef_text)
    tag = int(tag_text)
    # e.g. 1e400 overflows to inf
    if not math.isfinite(coefficient):
        raise MalformedLine(sequence_index)

    # Checked in this order; character validity is left to the classifier
    if not pauli_string:
        raise MalformedLine(sequence_index, "No operator provided!")
    if qubit_count is not None and len(pauli_string) != qubit_count:
        raise QubitCountMismatch(sequence_index)
    if coefficient == 0:
        raise ZeroCoefficient(sequence_index)
    if tag < 0:
        raise InvalidParameterTag(sequence_index, "Negative parameter!")
    if tag > MAX_PARAMETER_TAG:
        raise InvalidParameterTag(sequence_index, "Parameter out of bound!")

    if tag == 0:
        tag = sequence_index

    return OperatorRecord(sequence_index, pauli_string, coefficient, tag)


def parse_lines(lines: Iterable[str]) -> ParsedInput:
    """
    Parse every line of an input into a ParsedInput.

    Line numbers start at 1. The qubit count is taken from the first line's
    Pauli string and is fixed from then on.

    Parameters
    ----------
    lines : Iterable[str]
        Raw input lines, with or without trailing newlines

    Returns
    -------
    ParsedInput
        Records in input order, the qubit count and the distinct parameter
        tags in order of first occurrence

    Raises
    ------
    QasmTranslationError
        On the first invalid line
    ValueError
        If the input holds no lines at all
    """
    parsed = ParsedInput()
    seen_tags = set()
    qubit_count = None

    for sequence_index, line in enumerate(lines, start=1):
        record = parse_line(line, sequence_index, qubit_count)
        if qubit_count is None:
            qubit_count = parsed.qubit_count = len(record.pauli_string)

        if record.parameter_tag not in seen_tags:
            seen_tags.add(record.parameter_tag)
            parsed.parameter_indices.append(record.parameter_tag)
        parsed.records.append(record)

    if not parsed.records:
        raise ValueError("No operators provided")
    return parsed
