"""Shared configuration, errors and types."""

from ._config import Settings, settings
from ._exceptions import DataError, CorruptionError
from ._types import (
    JSONValue,
    Label,
    AttributeDomain,
    DomainTable,
    AttributeVector,
    POISONOUS,
    EDIBLE,
    LABELS,
)

__all__ = [
    "Settings",
    "settings",
    "DataError",
    "CorruptionError",
    "JSONValue",
    "Label",
    "AttributeDomain",
    "DomainTable",
    "AttributeVector",
    "POISONOUS",
    "EDIBLE",
    "LABELS",
]
