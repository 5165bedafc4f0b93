# -*- coding: utf-8 -*-

import pytest

from pauli_qasm.assembler import assemble_program, program_header, parameter_declarations

V2_HEADER = ('OPENQASM 2.0;\n'
             'include "qelib1.inc";\n'
             'qreg q[4];\n'
             'creg c[4];\n')

V3_HEADER = ('OPENQASM 3.0;\n'
             'include "stdgates.inc";\n'
             'qubit[4] q;\n'
             'bit[4] c;\n')


@pytest.mark.parametrize("version,header", [(2, V2_HEADER), (3, V3_HEADER)])
def test_program_header(version, header):
    assert program_header(4, version) == header


@pytest.mark.parametrize("version", [1, 4, "3"])
def test_unsupported_version(version):
    with pytest.raises(ValueError):
        program_header(4, version)


def test_parameter_declarations_keep_order():
    assert parameter_declarations([5, 1, 3]) == ("input float param5;\n"
                                                 "input float param1;\n"
                                                 "input float param3;\n")


def test_fragments_emitted_by_key():
    fragments = {3: "c", 1: "a", 2: "b", 4: ""}
    assert assemble_program(4, 2, False, [1], fragments) == V2_HEADER + "abc"


def test_parameters_only_when_enabled():
    fragments = {1: "x"}
    assert assemble_program(4, 3, False, [1, 2], fragments) == V3_HEADER + "x"
    assert assemble_program(4, 3, True, [1, 2], fragments) == (
        V3_HEADER + "input float param1;\ninput float param2;\n" + "x")


def test_no_deduplication():
    fragments = {1: "same\n", 2: "same\n"}
    assert assemble_program(4, 2, False, [], fragments).endswith("same\nsame\n")
