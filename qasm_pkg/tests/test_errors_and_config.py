# -*- coding: utf-8 -*-

import pickle
import pytest

from pauli_qasm.config import TranslationConfig
from pauli_qasm.errors import (
    QasmTranslationError,
    MalformedLine,
    QubitCountMismatch,
    ZeroCoefficient,
    InvalidParameterTag,
    UnsupportedCharacter,
    TooManyBasisCategories,
)

ERRORS = [MalformedLine, QubitCountMismatch, ZeroCoefficient,
          InvalidParameterTag, UnsupportedCharacter, TooManyBasisCategories]


@pytest.mark.parametrize("error", ERRORS)
def test_error_hierarchy_and_message(error):
    err = error(7)
    assert isinstance(err, QasmTranslationError)
    assert isinstance(err, ValueError)
    assert err.line_number == 7
    assert str(err) == f"Error! At line 7: {error.default_reason}"


@pytest.mark.parametrize("error", ERRORS)
def test_error_survives_pickling(error):
    """Errors raised in worker processes are pickled back to the parent."""
    err = pickle.loads(pickle.dumps(error(3, "custom reason")))
    assert type(err) is error
    assert err.line_number == 3
    assert err.reason == "custom reason"


def test_default_config():
    cfg = TranslationConfig()
    assert cfg.version == 2
    assert cfg.strategy == "threads"
    assert not cfg.parameterize
    assert cfg.multiplier_literal == "2*"


def test_config_multiplier_literal():
    assert TranslationConfig(multiplier=0.25).multiplier_literal == "0.250000*"


@pytest.mark.parametrize("kwargs", [
    {"version": 1},
    {"version": 4},
    {"strategy": "openmp"},
    {"max_workers": 0},
    {"parallel_threshold": -1},
    {"parameterize": True, "version": 2},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        TranslationConfig(**kwargs)


def test_parameterize_with_version_3():
    cfg = TranslationConfig(version=3, parameterize=True)
    assert cfg.parameterize
