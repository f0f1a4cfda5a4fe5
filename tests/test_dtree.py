"""Tests for the DecisionTree wrapper."""

import logging

import pytest

from categorical_tree import DecisionTree, Leaf, Split
from categorical_tree.datasets import MUSHROOM_DOMAINS
from categorical_tree.dtree import Record, _dtree


def test_fit_returns_self_and_sets_root(toy_domains, toy_records):
    tree = DecisionTree(toy_domains)
    assert tree.root is None

    assert tree.fit(toy_records) is tree
    assert tree.root == Split(
        attribute_index=0, children=[Leaf("poisonous"), Leaf("edible")]
    )
    assert tree.describe() == {"depth": 1, "splits": 1, "leaves": 2}


def test_refit_replaces_tree(toy_domains, toy_records):
    tree = DecisionTree(toy_domains).fit(toy_records)
    tree.fit([Record.of("edible", ["x", "p"])])
    assert tree.root == Leaf("edible")


def test_describe_before_fit_raises(toy_domains):
    with pytest.raises(ValueError, match="Fit the tree"):
        DecisionTree(toy_domains).describe()


def test_default_attribute_names(toy_domains):
    tree = DecisionTree(toy_domains)
    assert tree.attribute_names == ("attribute_0", "attribute_1")
    assert tree.num_attributes == 2
    assert repr(tree) == "DecisionTree(num_attributes=2)"


@pytest.mark.parametrize(
    "domains, names, message",
    [
        ([("a", "b"), ()], None, "at least one value"),
        ([("a", "A")], None, "duplicated"),
        ([], None, "at least one attribute domain"),
        (["ab"], None, "not a string"),
        ([("a", 1)], None, "must all be strings"),
        ([("a", "b")], ["one", "two"], "one name per domain"),
    ],
)
def test_invalid_domains(domains, names, message):
    with pytest.raises(ValueError, match=message):
        DecisionTree(domains, attribute_names=names)


def test_mushroom_records():
    first = [domain[0] for domain in MUSHROOM_DOMAINS]
    last = [domain[-1] for domain in MUSHROOM_DOMAINS]
    records = [
        Record.of("poisonous", first),
        Record.of("edible", last),
        Record.of("poisonous", first),
    ]

    tree = DecisionTree(MUSHROOM_DOMAINS).fit(records)

    # bruises is the first attribute whose two values both appear
    assert tree.root == Split(
        attribute_index=3, children=[Leaf("poisonous"), Leaf("edible")]
    )


def test_fit_goes_through_build_tree(toy_domains, toy_records, monkeypatch, caplog):
    calls = []
    original = _dtree.build_tree

    def recording_build_tree(domains, records):
        calls.append((domains, records))
        return original(domains, records)

    monkeypatch.setattr(_dtree, "build_tree", recording_build_tree)
    with caplog.at_level(logging.INFO, logger="categorical_tree"):
        DecisionTree(toy_domains).fit(toy_records)

    assert len(calls) == 1
    assert calls[0][0] == (("x", "y"), ("p", "q"))
    assert "Building tree over 4 records and 2 attributes" in caplog.text
    assert "Tree built: depth=1, splits=1, leaves=2" in caplog.text
