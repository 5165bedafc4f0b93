# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/__init__.py
"""
Pauli QASM Package

This package translates sums of Pauli operators, given one operator per line,
into OpenQASM 2 or 3 programs built from basis changes, CNOT ladders and Z
rotations.
"""

from .operator_record import OperatorRecord, ClassifiedOperator, ParsedInput
from .errors        import (
    QasmTranslationError,
    MalformedLine,
    QubitCountMismatch,
    ZeroCoefficient,
    InvalidParameterTag,
    UnsupportedCharacter,
    TooManyBasisCategories,
)
from .line_parser   import parse_line, parse_lines
from .classifier    import classify_pauli
from .synthesizer   import synthesize_fragment, synthesize_record, BasisChange
from .reducer       import reduce_fragments
from .assembler     import assemble_program
from .config        import TranslationConfig
from .translator    import QasmTranslator, parse_circuit
from .utils         import random_pauli_label, random_operator_lines

__all__ = [
    "OperatorRecord",
    "ClassifiedOperator",
    "ParsedInput",
    "QasmTranslationError",
    "MalformedLine",
    "QubitCountMismatch",
    "ZeroCoefficient",
    "InvalidParameterTag",
    "UnsupportedCharacter",
    "TooManyBasisCategories",
    "parse_line",
    "parse_lines",
    "classify_pauli",
    "synthesize_fragment",
    "synthesize_record",
    "BasisChange",
    "reduce_fragments",
    "assemble_program",
    "TranslationConfig",
    "QasmTranslator",
    "parse_circuit",
    "random_pauli_label",
    "random_operator_lines",
]

# Version
__version__ = "0.1.0"
