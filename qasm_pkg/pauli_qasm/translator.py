# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/translator.py
import os
from typing import Iterable, Optional

from .assembler import assemble_program
from .config import TranslationConfig
from .line_parser import parse_lines
from .operator_record import ParsedInput
from .reducer import reduce_fragments

__all__ = [
    "QasmTranslator",
    "parse_circuit",
]


class QasmTranslator:
    """
    Translate a sum of Pauli operators into an OpenQASM program.

    The input holds one operator per line, ``<pauli_string> <coefficient>
    <parameter_tag>``. Each operator becomes a fragment implementing its
    Pauli rotation; fragments are emitted in input order whatever strategy
    computed them.

    Any invalid line raises a QasmTranslationError naming the line, and
    nothing is returned or written.

    Attributes
    ----------
    config : TranslationConfig
        Version, strategy and formatting options
    """

    def __init__(self, config: Optional[TranslationConfig] = None, **kwargs):
        """
        Initialize the translator.

        Parameters
        ----------
        config : TranslationConfig, optional
            Full configuration. If omitted one is built from ``kwargs``.
        **kwargs
            Fields of TranslationConfig, e.g. ``version=3``
        """
        if config is not None and kwargs:
            raise ValueError("Pass either a config or keyword options, not both")
        self.config = config if config is not None else TranslationConfig(**kwargs)

    def parse(self, lines: Iterable[str]) -> ParsedInput:
        parsed = parse_lines(lines)
        if self.config.verbose:
            print(f"Parsed {len(parsed)} operators on {parsed.qubit_count} qubits")
        return parsed

    def translate_parsed(self, parsed: ParsedInput) -> str:
        """Synthesize and assemble an already parsed input."""
        cfg = self.config
        fragments = reduce_fragments(parsed.records,
                                     mup=cfg.multiplier_literal,
                                     parameterize=cfg.parameterize,
                                     strategy=cfg.strategy,
                                     max_workers=cfg.max_workers,
                                     parallel_threshold=cfg.parallel_threshold,
                                     show_progress=cfg.show_progress)
        return assemble_program(parsed.qubit_count,
                                cfg.version,
                                cfg.parameterize,
                                parsed.parameter_indices,
                                fragments)

    def translate_lines(self, lines: Iterable[str]) -> str:
        """
        Translate input lines into an OpenQASM program.

        Parameters
        ----------
        lines : Iterable[str]
            One operator per line

        Returns
        -------
        str
            The OpenQASM program

        Raises
        ------
        QasmTranslationError
            On the first invalid line
        """
        return self.translate_parsed(self.parse(lines))

    def translate_text(self, text: str) -> str:
        lines = text.split("\n")
        # A final newline does not start another line
        if lines[-1] == "":
            lines.pop()
        return self.translate_lines(line.rstrip("\r") for line in lines)

    def translate_file(self, in_filename: str, out_filename: Optional[str] = None) -> str:
        """
        Translate an input file, optionally writing the program to disk.

        The output file is only written once the whole input translated
        successfully.

        Parameters
        ----------
        in_filename : str
            Path to the operator file
        out_filename : str, optional
            Where to write the program

        Returns
        -------
        str
            The OpenQASM program
        """
        with open(in_filename, "r", encoding="utf-8") as f:
            qasm = self.translate_lines(line.rstrip("\r\n") for line in f)

        if out_filename:
            self._save_program(out_filename, qasm)
        return qasm

    def _save_program(self, out_filename: str, qasm: str) -> None:
        # Create directory if needed
        dir_path = os.path.dirname(out_filename)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)

        if self.config.verbose:
            print(f"Saving OpenQASM program to {out_filename}...")
        with open(out_filename, "w", encoding="utf-8") as f:
            f.write(qasm)


def parse_circuit(in_filename: str,
                  version: int = 2,
                  strategy: str = "threads",
                  parameterize: bool = False,
                  out_filename: Optional[str] = None,
                  multiplier: Optional[float] = None,
                  **kwargs) -> str:
    """
    Parse an operator file into its OpenQASM representation.

    Parameters
    ----------
    in_filename : str
        Path to the input file, one operator per line
    version : int
        OpenQASM major version, 2 (default) or 3
    strategy : str
        'sequential', 'threads' (default) or 'processes'
    parameterize : bool
        Declare and use symbolic ``param<tag>`` inputs (version 3 only)
    out_filename : str, optional
        If provided, write the program into this file
    multiplier : float, optional
        Factor to multiply all coefficients with; 2 when omitted
    **kwargs
        Remaining TranslationConfig fields (max_workers, show_progress, ...)

    Returns
    -------
    str
        OpenQASM version of the input file
    """
    translator = QasmTranslator(version=version,
                                strategy=strategy,
                                parameterize=parameterize,
                                multiplier=multiplier,
                                **kwargs)
    return translator.translate_file(in_filename, out_filename)
