# -*- coding: utf-8 -*-

# qasm_pkg/pauli_qasm/reducer.py
"""
Fan-out/fan-in of per-operator synthesis.

Every record is classified and synthesized independently. Work is split into
chunks that each return ``(sequence_index, fragment)`` pairs; the parent
merges them and orders the result by ``sequence_index``, so the emission
order never depends on which worker finishes first.
"""

from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed
from typing import Dict, List, Sequence, Tuple

from tqdm.auto import tqdm

from .errors import QasmTranslationError
from .operator_record import OperatorRecord
from .synthesizer import DEFAULT_MULTIPLIER_LITERAL, synthesize_record

__all__ = ["reduce_fragments"]

_EXECUTORS = {
    "threads":   ThreadPoolExecutor,
    "processes": ProcessPoolExecutor,
}


def _synthesize_batch(args) -> List[Tuple[int, str]]:
    """
    Helper function for the executors to synthesize a batch of records.

    Parameters
    ----------
    args : tuple
        Contains (records_data, mup, parameterize)
        records_data: List of (sequence_index, pauli_string, coefficient, tag) tuples
        mup: str, multiplier literal
        parameterize: bool

    Returns
    -------
    List[Tuple[int, str]]
        (sequence_index, fragment) for every record of the batch
    """
    records_data, mup, parameterize = args

    results = []
    for record_tuple in records_data:
        record = OperatorRecord(*record_tuple)
        results.append((record.sequence_index,
                        synthesize_record(record, mup, parameterize)))
    return results


def _chunk(records_data: List, max_workers: int) -> List[List]:
    chunk_size = max(1, len(records_data) // max_workers)
    return [records_data[i:i + chunk_size]
            for i in range(0, len(records_data), chunk_size)]


def reduce_fragments(records: Sequence[OperatorRecord],
                     mup: str = DEFAULT_MULTIPLIER_LITERAL,
                     parameterize: bool = False,
                     strategy: str = "sequential",
                     max_workers: int = 8,
                     parallel_threshold: int = 0,
                     show_progress: bool = False,
                     ) -> Dict[int, str]:
    """
    Synthesize the fragment of every record and order them by line.

    Parameters
    ----------
    records : Sequence[OperatorRecord]
        Parsed operators
    mup : str
        Multiplier literal for the rotation angles
    parameterize : bool
        Whether angles carry a symbolic parameter
    strategy : str
        'sequential', 'threads' or 'processes'
    max_workers : int
        Maximum number of pool workers
    parallel_threshold : int
        Below this many records the work runs sequentially
    show_progress : bool
        Show a progress bar over completed chunks

    Returns
    -------
    Dict[int, str]
        Fragments keyed by ``sequence_index``, in ascending key order

    Raises
    ------
    QasmTranslationError
        If any record fails to classify. With several failures the one with
        the lowest line number is raised.
    ValueError
        If the strategy is unknown
    """
    if strategy != "sequential" and strategy not in _EXECUTORS:
        raise ValueError(f"Unknown strategy {strategy!r}")

    records_data = [record.to_tuple() for record in records]

    # For small inputs or if parallelism is disabled, process sequentially
    if strategy == "sequential" or len(records_data) < parallel_threshold:
        pairs = _synthesize_batch((records_data, mup, parameterize))
        return dict(sorted(pairs))

    chunks = _chunk(records_data, max_workers)
    fragments: Dict[int, str] = {}
    errors: List[QasmTranslationError] = []

    with _EXECUTORS[strategy](max_workers=max_workers) as executor:
        futures = [executor.submit(_synthesize_batch, (chunk, mup, parameterize))
                   for chunk in chunks]

        for future in tqdm(as_completed(futures), total=len(futures),
                           desc=f"Synthesizing ({strategy})",
                           disable=not show_progress):
            try:
                chunk_results = future.result()
            except QasmTranslationError as err:
                errors.append(err)
                continue
            fragments.update(chunk_results)

    if errors:
        raise min(errors, key=lambda err: err.line_number)

    return dict(sorted(fragments.items()))
