# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/errors.py
"""
Error taxonomy for the Pauli-sum to OpenQASM translation.

Every error names the 1-based input line it was raised for. All of them are
fatal to the whole translation: no program text is returned and no output
file is written once one is raised.
"""

__all__ = [
    "QasmTranslationError",
    "MalformedLine",
    "QubitCountMismatch",
    "ZeroCoefficient",
    "InvalidParameterTag",
    "UnsupportedCharacter",
    "TooManyBasisCategories",
]


class QasmTranslationError(ValueError):
    """
    Base class for input errors detected while translating one line.

    Attributes
    ----------
    line_number : int
        1-based line of the input the error was raised for
    reason : str
        Human-readable reason
    """
    default_reason = "Unknown error!"

    def __init__(self, line_number: int, reason: str | None = None):
        # args carry both values so the error survives pickling across processes
        super().__init__(line_number, reason or self.default_reason)
        self.line_number = line_number
        self.reason = reason or self.default_reason

    def __str__(self) -> str:
        return f"Error! At line {self.line_number}: {self.reason}"


class MalformedLine(QasmTranslationError):
    default_reason = "Wrong format!"


class QubitCountMismatch(QasmTranslationError):
    default_reason = "Non-matching length of string representation!"


class ZeroCoefficient(QasmTranslationError):
    default_reason = "Zero coefficient!"


class InvalidParameterTag(QasmTranslationError):
    default_reason = "Invalid parameter!"


class UnsupportedCharacter(QasmTranslationError):
    default_reason = "Unsupported character instruction!"


class TooManyBasisCategories(QasmTranslationError):
    default_reason = "Too many Pauli basis categories!"
