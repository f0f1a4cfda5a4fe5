from __future__ import annotations

from typing import Dict, List, Literal, Sequence, Tuple, Union

JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, Dict[str, "JSONValue"], List["JSONValue"]]

Label = Literal["poisonous", "edible"]
AttributeDomain = Sequence[str]
"""Ordered legal values of one attribute. The order fixes child positions."""
DomainTable = Sequence[AttributeDomain]
AttributeVector = Tuple[str, ...]

POISONOUS: Label = "poisonous"
EDIBLE: Label = "edible"
LABELS: Tuple[Label, Label] = (POISONOUS, EDIBLE)
