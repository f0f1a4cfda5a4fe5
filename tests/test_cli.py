"""Tests for the command line entry point."""

import logging

from categorical_tree.cli import main
from categorical_tree.datasets import MUSHROOM_ATTRIBUTES, MUSHROOM_DOMAINS


def test_builds_tree_from_custom_domains(tmp_path, caplog):
    data = tmp_path / "data.csv"
    data.write_text(
        "class,a,b\npoisonous,x,p\npoisonous,x,q\nedible,y,p\nedible,y,q\n",
        encoding="utf-8",
    )
    domains = tmp_path / "domains.json"
    domains.write_text('{"shape": ["x", "y"], "odor": ["p", "q"]}', encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="categorical_tree"):
        code = main([str(data), "--domains", str(domains)])

    assert code == 0
    assert "Data read in..." in caplog.text
    assert "Tree built..." in caplog.text
    assert "Root is split on 'shape'" in caplog.text


def test_builds_tree_with_mushroom_table(tmp_path, caplog):
    header = ",".join(["class", *MUSHROOM_ATTRIBUTES])
    first = ",".join(["poisonous", *(d[0] for d in MUSHROOM_DOMAINS)])
    last = ",".join(["edible", *(d[-1] for d in MUSHROOM_DOMAINS)])
    data = tmp_path / "mushrooms.csv"
    data.write_text(f"{header}\n{first}\n{last}\n", encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="categorical_tree"):
        code = main([str(data)])

    assert code == 0
    assert "Root is split on 'bruises'" in caplog.text


def test_missing_file_exits_with_error(tmp_path, caplog):
    code = main([str(tmp_path / "missing.csv")])
    assert code == 1
    assert "Could not build tree" in caplog.text


def test_malformed_file_exits_with_error(tmp_path, caplog):
    data = tmp_path / "data.csv"
    data.write_text("class,a\nedible,x\n", encoding="utf-8")
    assert main([str(data)]) == 1
    assert "expected 22" in caplog.text
