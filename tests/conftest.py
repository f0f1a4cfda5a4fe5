"""Shared fixtures for the test suite."""

from typing import Callable, List, Sequence, Tuple

import pytest

from categorical_tree.dtree import Record, RecordStore


def _make_records(rows: Sequence[Tuple[str, Sequence[str]]]) -> List[Record]:
    return [Record.of(label, attributes) for label, attributes in rows]


@pytest.fixture
def make_records() -> Callable[[Sequence[Tuple[str, Sequence[str]]]], List[Record]]:
    """Factory building records from ``(label, attributes)`` pairs."""
    return _make_records


@pytest.fixture
def toy_domains() -> List[Tuple[str, ...]]:
    """Two attributes, A in {x, y} and B in {p, q}."""
    return [("x", "y"), ("p", "q")]


@pytest.fixture
def toy_records() -> List[Record]:
    """A separates the classes perfectly, B does not."""
    return _make_records(
        [
            ("poisonous", ["x", "p"]),
            ("poisonous", ["x", "q"]),
            ("edible", ["y", "p"]),
            ("edible", ["y", "q"]),
        ]
    )


@pytest.fixture
def toy_store(toy_records: List[Record]) -> RecordStore:
    return RecordStore(toy_records)
