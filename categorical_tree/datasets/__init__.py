"""Dataset collaborators: the mushroom domain table and file readers."""

from ._mushroom import MUSHROOM_ATTRIBUTES, MUSHROOM_DOMAINS
from ._loaders import AttributeSpec, load_attribute_specs, load_domains
from ._loaders import header_attribute_names, read_records

__all__ = [
    "MUSHROOM_ATTRIBUTES",
    "MUSHROOM_DOMAINS",
    "AttributeSpec",
    "load_attribute_specs",
    "load_domains",
    "header_attribute_names",
    "read_records",
]
