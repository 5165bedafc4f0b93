# -*- coding: utf-8 -*-

import pytest

from pauli_qasm.errors import UnsupportedCharacter
from pauli_qasm.line_parser import parse_lines
from pauli_qasm.reducer import reduce_fragments, _chunk, _synthesize_batch
from pauli_qasm.synthesizer import synthesize_record
from pauli_qasm.utils import random_operator_lines

STRATEGIES = ["sequential", "threads", "processes"]


@pytest.fixture(scope="module")
def parsed_random():
    return parse_lines(random_operator_lines(200, 5, seed=11, shared_tags=True))


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_fragments_ordered_by_line(strategy, parsed_random):
    fragments = reduce_fragments(parsed_random.records, strategy=strategy,
                                 max_workers=4, parallel_threshold=0)

    keys = list(fragments)
    assert keys == list(range(1, len(parsed_random) + 1))
    for record in parsed_random.records:
        assert fragments[record.sequence_index] == synthesize_record(record)


@pytest.mark.parametrize("strategy", ["threads", "processes"])
@pytest.mark.parametrize("max_workers", [1, 3, 16])
def test_strategy_does_not_change_output(strategy, max_workers, parsed_random):
    reference = reduce_fragments(parsed_random.records, strategy="sequential")
    fragments = reduce_fragments(parsed_random.records, strategy=strategy,
                                 max_workers=max_workers, parallel_threshold=0)
    assert fragments == reference
    assert list(fragments) == list(reference)


def test_small_inputs_run_sequentially(parsed_random):
    """Below the threshold the pool is never used; the result is the same."""
    fragments = reduce_fragments(parsed_random.records, strategy="processes",
                                 parallel_threshold=10_000)
    assert list(fragments) == list(range(1, len(parsed_random) + 1))


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_lowest_failing_line_is_raised(strategy):
    lines = ["XZ 1.0 1"] * 40
    lines[31] = "XQ 1.0 1"
    lines[8] = "AZ 1.0 1"
    parsed = parse_lines(lines)

    with pytest.raises(UnsupportedCharacter) as exc:
        reduce_fragments(parsed.records, strategy=strategy,
                         max_workers=4, parallel_threshold=0)
    assert exc.value.line_number == 9


def test_unknown_strategy(parsed_random):
    with pytest.raises(ValueError):
        reduce_fragments(parsed_random.records, strategy="openmp")


def test_parameterized_batch():
    parsed = parse_lines(["ZZ 0.5 3"])
    pairs = _synthesize_batch(([r.to_tuple() for r in parsed.records], "2*", True))
    assert pairs[0][0] == 1
    assert "rz(2*0.5*param3) q[1];" in pairs[0][1]


@pytest.mark.parametrize("n,workers", [(10, 3), (3, 8), (16, 4), (1, 1)])
def test_chunks_cover_all_records(n, workers):
    data = list(range(n))
    chunks = _chunk(data, workers)
    assert [x for c in chunks for x in c] == data
    assert all(chunks)
