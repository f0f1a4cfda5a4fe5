"""Tree node variants and read-only structural queries over a built tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from categorical_tree.core import CorruptionError, DomainTable


@dataclass(frozen=True, slots=True)
class Leaf:
    """A terminal node carrying the final classification."""

    classification: str = field(
        metadata={"description": "The class token returned at this leaf."}
    )


@dataclass(slots=True)
class Split:
    """An internal node testing one attribute.

    ``children[k]`` is the subtree for records whose value at
    ``attribute_index`` equals the k-th value of that attribute's domain.
    Slots are ``None`` until the builder fills them.
    """

    attribute_index: int = field(
        metadata={"description": "Index of the attribute tested at this node."}
    )
    children: List[TreeNode | None] = field(
        metadata={"description": "One subtree per domain value, in domain order."}
    )

    @classmethod
    def empty(cls, attribute_index: int, width: int) -> Split:
        """Create a split with ``width`` unfilled child slots."""
        return cls(attribute_index=attribute_index, children=[None] * width)

    @property
    def is_complete(self) -> bool:
        """Check whether every child slot has been filled."""
        return all(child is not None for child in self.children)


TreeNode = Union[Leaf, Split]


def check_tree(node: TreeNode, domains: DomainTable) -> None:
    """Verify every split has one filled child per value of its domain.

    Raises:
        CorruptionError: If a split has an unfilled slot or the wrong width.
    """
    stack: List[TreeNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Leaf):
            continue
        index = current.attribute_index
        if not 0 <= index < len(domains):
            raise CorruptionError(f"Split on unknown attribute index {index}")
        width = len(domains[index])
        if len(current.children) != width:
            raise CorruptionError(
                f"Split on attribute {index} has {len(current.children)} "
                f"children, expected {width}"
            )
        for k, child in enumerate(current.children):
            if child is None:
                raise CorruptionError(
                    f"Split on attribute {index} has no subtree for "
                    f"value {domains[index][k]!r}"
                )
            stack.append(child)


def _filled(node: Split) -> List[TreeNode]:
    if not node.is_complete:
        raise CorruptionError(
            f"Split on attribute {node.attribute_index} is not fully built"
        )
    return [c for c in node.children if c is not None]


def depth(node: TreeNode) -> int:
    """Number of splits on the longest root-to-leaf path."""
    if isinstance(node, Leaf):
        return 0
    return 1 + max((depth(c) for c in _filled(node)), default=0)


def count_leaves(node: TreeNode) -> int:
    if isinstance(node, Leaf):
        return 1
    return sum(count_leaves(c) for c in _filled(node))


def count_splits(node: TreeNode) -> int:
    if isinstance(node, Leaf):
        return 0
    return 1 + sum(count_splits(c) for c in _filled(node))
