"""A categorical decision tree learner for two-class data.

Each node tests one attribute that has not been tested above it and has one
child per legal value of that attribute.
"""

from ._records import Record, RecordStore
from ._nodes import Leaf, Split, TreeNode, check_tree, depth, count_leaves
from ._nodes import count_splits
from ._induction import build, build_tree, impurity_score, select_attribute
from ._induction import score_attributes
from ._dtree import DecisionTree

__all__ = [
    "Record",
    "RecordStore",
    "Leaf",
    "Split",
    "TreeNode",
    "check_tree",
    "depth",
    "count_leaves",
    "count_splits",
    "build",
    "build_tree",
    "impurity_score",
    "select_attribute",
    "score_attributes",
    "DecisionTree",
]
