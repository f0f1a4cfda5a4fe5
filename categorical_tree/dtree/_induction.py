"""Recursive partitioning over categorical attributes."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, MutableSequence, Sequence, Tuple

import numpy as np

from categorical_tree.core import AttributeDomain, DomainTable, EDIBLE, POISONOUS
from ._nodes import Leaf, Split, TreeNode
from ._records import Record, RecordStore


logger = logging.getLogger(__name__)


def impurity_score(
    store: RecordStore, attr_index: int, domain: AttributeDomain
) -> float:
    """Weighted impurity of splitting ``store`` on ``attr_index``.

    Computes ``sum_k (n_k / total) * (1 - e_k / n_k - p_k / n_k)`` in float64,
    where ``n_k`` counts records holding the k-th domain value and ``e_k``,
    ``p_k`` count the edible and poisonous ones among them. A value with no
    records gives ``0 / 0`` and the whole score becomes NaN.

    Since every record is either edible or poisonous, each defined term is
    zero up to rounding, so in practice the score only tells apart attributes
    that have every value represented (about 0) from those that do not (NaN).
    """
    total = np.float64(store.size())
    score = np.float64(0.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        for value in domain:
            n_value = np.float64(store.count_with_value(attr_index, value))
            n_poison = np.float64(
                store.count_with_value_and_label(attr_index, value, POISONOUS)
            )
            n_edible = np.float64(
                store.count_with_value_and_label(attr_index, value, EDIBLE)
            )
            score += (n_value / total) * (1 - n_edible / n_value - n_poison / n_value)
    return float(score)


def score_attributes(
    store: RecordStore, used: Sequence[bool], domains: DomainTable
) -> List[Tuple[int, float]]:
    """Score every unused attribute, in ascending index order."""
    return [
        (i, impurity_score(store, i, domains[i]))
        for i in range(len(domains))
        if not used[i]
    ]


def select_attribute(
    store: RecordStore, used: Sequence[bool], domains: DomainTable
) -> int | None:
    """Pick the unused attribute with the strictly lowest numeric score.

    Ties keep the lowest index. NaN scores are never selected. Returns None
    when no unused attribute has a numeric score.
    """
    lowest = math.inf
    chosen: int | None = None
    for index, score in score_attributes(store, used, domains):
        # NaN compares False against everything
        if score < lowest:
            lowest = score
            chosen = index
    if chosen is not None:
        logger.debug(f"Selected attribute {chosen} with score {lowest}")
    return chosen


def build(
    store: RecordStore, used: MutableSequence[bool], domains: DomainTable
) -> TreeNode:
    """Build the subtree for ``store``.

    ``used`` is shared by the whole recursion and updated in place: once an
    attribute is chosen it stays marked for the siblings that follow and
    for everything below them.

    Args:
        store: Records reaching this node.
        used: One flag per attribute, True if already tested on the way here.
        domains: Ordered legal values of every attribute.

    Returns:
        A Leaf, or a Split with one subtree per value of the chosen attribute.
    """
    if all(used):
        return Leaf(store.majority_label())

    if store.is_all_label(POISONOUS):
        return Leaf(POISONOUS)
    if store.is_all_label(EDIBLE):
        return Leaf(EDIBLE)

    chosen = select_attribute(store, used, domains)
    if chosen is None:
        logger.debug(
            f"No attribute can split {store.size()} records. Using the majority."
        )
        return Leaf(store.majority_label())

    domain = domains[chosen]
    node = Split.empty(chosen, len(domain))
    used[chosen] = True
    for k, value in enumerate(domain):
        sublist = store.filter_by_value(chosen, value)
        node.children[k] = build(sublist, used, domains)
    return node


def build_tree(
    domains: DomainTable, records: Iterable[Record] | RecordStore
) -> TreeNode:
    """Induce a tree over ``records`` with every attribute initially unused.

    Records are trusted: a short attribute vector surfaces as an IndexError.
    """
    store = records if isinstance(records, RecordStore) else RecordStore(records)
    logger.info(
        f"Building tree over {store.size()} records and {len(domains)} attributes"
    )
    root = build(store, [False] * len(domains), domains)
    logger.info("Tree built")
    return root
