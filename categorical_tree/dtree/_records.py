"""Labeled records and the ordered store the induction engine queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence

from categorical_tree.core import AttributeVector, EDIBLE, POISONOUS, Label


def _same(a: str, b: str) -> bool:
    return a.lower() == b.lower()


@dataclass(frozen=True, slots=True)
class Record:
    """One labeled observation."""

    label: str = field(metadata={"description": "The class token of the record."})
    attributes: AttributeVector = field(
        metadata={"description": "One value token per attribute index."}
    )

    @classmethod
    def of(cls, label: str, attributes: Sequence[str]) -> Record:
        """Build a record from any sequence of attribute tokens."""
        return cls(label=label, attributes=tuple(attributes))


class RecordStore:
    """An insertion-ordered collection of records.

    Every query is a single linear scan. Labels and values are compared
    case-insensitively. Queries never mutate the store, and filtering shares
    record references instead of copying them.

    Args:
        records: Initial records, kept in the given order.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[Record] | None = None):
        self._records: List[Record] = list(records) if records is not None else []

    def append(self, record: Record) -> None:
        """Add a record at the end of the store."""
        self._records.append(record)

    def extend(self, records: Iterable[Record]) -> None:
        """Add records at the end of the store, in order."""
        self._records.extend(records)

    def size(self) -> int:
        """Number of records in the store."""
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def is_all_label(self, label: str) -> bool:
        """Check whether every record carries ``label``. True for an empty store."""
        return all(_same(r.label, label) for r in self._records)

    def label_counts(self) -> Dict[Label, int]:
        """Count records per class. Anything that is not edible counts as poisonous."""
        edible = sum(1 for r in self._records if _same(r.label, EDIBLE))
        return {POISONOUS: len(self._records) - edible, EDIBLE: edible}

    def majority_label(self) -> Label:
        """Return the class held by the majority of records.

        Ties, including the empty store, resolve to ``"poisonous"``.
        """
        counts = self.label_counts()
        if counts[POISONOUS] >= counts[EDIBLE]:
            return POISONOUS
        return EDIBLE

    def count_with_value(self, attr_index: int, value: str) -> int:
        """Number of records whose attribute ``attr_index`` equals ``value``."""
        return sum(1 for r in self._records if _same(r.attributes[attr_index], value))

    def count_with_value_and_label(
        self, attr_index: int, value: str, label: str
    ) -> int:
        """Number of records with both the given attribute value and label."""
        return sum(
            1
            for r in self._records
            if _same(r.attributes[attr_index], value) and _same(r.label, label)
        )

    def filter_by_value(self, attr_index: int, value: str) -> RecordStore:
        """Return a new store with the matching records, in their original order."""
        return RecordStore(
            r for r in self._records if _same(r.attributes[attr_index], value)
        )

    def __repr__(self) -> str:
        counts = self.label_counts()
        return (
            f"RecordStore(size={len(self._records)}, "
            f"poisonous={counts[POISONOUS]}, edible={counts[EDIBLE]})"
        )
