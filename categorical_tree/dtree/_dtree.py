"""DecisionTree.

Categorical decision tree over a fixed attribute-domain table.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

from categorical_tree.core import DomainTable
from ._induction import build_tree
from ._nodes import TreeNode, check_tree, count_leaves, count_splits, depth
from ._records import Record, RecordStore


logger = logging.getLogger(__name__)


class DecisionTree:
    """Categorical decision tree classifier for two classes.

    Args:
        domains: For every attribute index, the ordered legal values. The
            order fixes which child of a split matches which value.
        attribute_names: Optional display names, one per attribute.
    """

    def __init__(
        self,
        domains: DomainTable,
        attribute_names: Sequence[str] | None = None,
    ):
        self._verify_input_data(domains, attribute_names)

        self.domains: Tuple[Tuple[str, ...], ...] = tuple(tuple(d) for d in domains)
        self.attribute_names: Tuple[str, ...] = (
            tuple(attribute_names)
            if attribute_names is not None
            else tuple(f"attribute_{i}" for i in range(len(self.domains)))
        )
        self._root: TreeNode | None = None

    def _verify_input_data(
        self,
        domains: DomainTable,
        attribute_names: Sequence[str] | None,
    ) -> None:
        """Verify the input data."""
        if isinstance(domains, str) or len(domains) == 0:
            raise ValueError("domains must hold at least one attribute domain")
        for i, domain in enumerate(domains):
            if isinstance(domain, str):
                raise ValueError(
                    f"Domain {i} must be a sequence of values, not a string"
                )
            if len(domain) == 0:
                raise ValueError(f"Domain {i} must have at least one value")
            if not all(isinstance(v, str) for v in domain):
                raise ValueError(f"Domain {i} values must all be strings")
            if len({v.lower() for v in domain}) != len(domain):
                raise ValueError(f"Domain {i} has duplicated values")
        if attribute_names is not None and len(attribute_names) != len(domains):
            raise ValueError("attribute_names must have one name per domain")

    @property
    def num_attributes(self) -> int:
        """Number of attributes the tree can split on."""
        return len(self.domains)

    @property
    def root(self) -> TreeNode | None:
        """Root of the built tree. None before fit."""
        return self._root

    def fit(self, records: Iterable[Record] | RecordStore) -> DecisionTree:
        """Build the tree over ``records``, replacing any previous tree.

        Args:
            records: Labeled records. They are not validated against the domains.

        Returns:
            The tree itself.
        """
        self._root = build_tree(self.domains, records)
        check_tree(self._root, self.domains)
        logger.info(
            f"Tree built: depth={depth(self._root)}, "
            f"splits={count_splits(self._root)}, leaves={count_leaves(self._root)}"
        )
        return self

    def describe(self) -> dict[str, int]:
        """Size summary of the built tree.

        Raises:
            ValueError: If the tree has not been built.
        """
        if self._root is None:
            raise ValueError("Tree is empty. Fit the tree before describing it.")
        return {
            "depth": depth(self._root),
            "splits": count_splits(self._root),
            "leaves": count_leaves(self._root),
        }

    def __repr__(self) -> str:
        return f"DecisionTree(num_attributes={self.num_attributes})"
