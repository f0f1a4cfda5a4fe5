"""Readers for attribute-domain tables and delimited record files."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import List, Tuple, cast

import orjson
import pandas as pd
from pydantic import BaseModel, Field, ValidationError, field_validator

from categorical_tree.core import DataError, JSONValue
from categorical_tree.dtree import Record, RecordStore


logger = logging.getLogger(__name__)


class AttributeSpec(BaseModel):
    """One attribute and its ordered legal values."""

    name: str = Field(..., description="Display name of the attribute.")
    values: List[str] = Field(
        ..., description="Legal values, in the order children are attached."
    )

    @field_validator("values")
    @classmethod
    def _distinct_values(cls, values: List[str]) -> List[str]:
        if not values:
            raise ValueError("an attribute needs at least one value")
        if len({v.lower() for v in values}) != len(values):
            raise ValueError("values must be distinct (case-insensitive)")
        return values


def load_attribute_specs(path: str | PathLike[str]) -> List[AttributeSpec]:
    """Read a JSON domain table.

    The file holds either a list of value lists, or an object mapping each
    attribute name to its value list. Attribute order is file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        DataError: If the content is not a valid domain table.
    """
    try:
        raw = cast(JSONValue, orjson.loads(Path(path).read_bytes()))
    except orjson.JSONDecodeError as e:
        raise DataError(f"Domain table {path} is not valid JSON: {e}") from e

    if isinstance(raw, list):
        entries = [(f"attribute_{i}", values) for i, values in enumerate(raw)]
    elif isinstance(raw, dict):
        entries = list(raw.items())
    else:
        raise DataError("Domain table must be a JSON list or object")

    if not entries:
        raise DataError(f"Domain table {path} is empty")

    specs: List[AttributeSpec] = []
    for name, values in entries:
        try:
            specs.append(AttributeSpec(name=name, values=values))  # type: ignore
        except ValidationError as e:
            raise DataError(f"Invalid domain for attribute {name!r}: {e}") from e

    logger.debug(f"Loaded {len(specs)} attribute domains from {path}")
    return specs


def load_domains(path: str | PathLike[str]) -> List[Tuple[str, ...]]:
    """Read a JSON domain table and return only the value tuples."""
    return [tuple(attr.values) for attr in load_attribute_specs(path)]


def _read_frame(path: str | PathLike[str], sep: str, **kwargs: object) -> pd.DataFrame:
    # na_values=[] keeps tokens verbatim while missing trailing fields stay NaN
    try:
        return pd.read_csv(  # type: ignore
            path,
            sep=sep,
            header=None,
            dtype=str,
            engine="python",
            keep_default_na=False,
            na_values=[],
            **kwargs,
        )
    except pd.errors.EmptyDataError as e:
        raise DataError(f"{path} has no rows") from e
    except pd.errors.ParserError as e:
        raise DataError(f"{path} is not a well-formed delimited file: {e}") from e


def header_attribute_names(
    path: str | PathLike[str],
    n_attributes: int | None = None,
    sep: str = ",",
) -> Tuple[str, ...]:
    """Attribute names from the header row, skipping the label column."""
    header = _read_frame(path, sep, nrows=1)
    names = [str(v) for v in header.iloc[0].tolist()][1:]
    if n_attributes is not None:
        if len(names) < n_attributes:
            raise DataError(
                f"Header of {path} names {len(names)} attributes, "
                f"expected {n_attributes}"
            )
        names = names[:n_attributes]
    return tuple(names)


def read_records(
    path: str | PathLike[str],
    n_attributes: int | None = None,
    sep: str = ",",
) -> RecordStore:
    """Read labeled records from a delimited file.

    The first row is a header and is skipped. Each following row holds the
    class label and then one token per attribute. Tokens are kept verbatim,
    so values such as ``none`` or ``?`` are not treated as missing.

    Args:
        path: The file to read.
        n_attributes: Attribute columns to keep after the label. Extra columns
            are ignored, also when only some rows carry them. If None, every
            column named by the header row is kept.
        sep: Field delimiter.

    Returns:
        A store with one record per row, in file order.

    Raises:
        DataError: If a row has fewer than ``1 + n_attributes`` fields.
    """
    n_cols = _read_frame(path, sep, nrows=1).shape[1]
    if n_attributes is None:
        n_attributes = n_cols - 1
    if n_attributes < 0 or n_cols < 1 + n_attributes:
        raise DataError(
            f"{path} has {n_cols} columns, expected at least {1 + n_attributes}"
        )

    # rows wider than the header are cut down instead of failing the file
    df = _read_frame(path, sep, on_bad_lines=lambda fields: fields[:n_cols])
    # header row dropped after parsing so a header-only file yields no records
    df = df.iloc[1:, : 1 + n_attributes].reset_index(drop=True)
    short_rows = df.index[df.isna().any(axis=1)].tolist()
    if short_rows:
        raise DataError(
            f"{path}: {len(short_rows)} rows have fewer than "
            f"{1 + n_attributes} fields (first at data row {short_rows[0] + 1})"
        )

    store = RecordStore(
        Record(label=row[0], attributes=tuple(row[1:]))
        for row in df.itertuples(index=False, name=None)
    )
    logger.info(f"Read {store.size()} records with {n_attributes} attributes")
    return store
