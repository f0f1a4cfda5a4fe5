"""Categorical Tree.

Induces two-class decision trees over categorical attributes, one split per
attribute value, from a fixed table of attribute domains.
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path
import tomllib

from .dtree import DecisionTree, Record, RecordStore, Leaf, Split, TreeNode
from .dtree import build_tree


def _detect_version() -> str:
    """Return the installed distribution version.

    Falls back to ``[project].version`` in the repository's ``pyproject.toml``
    when running from an uninstalled checkout.
    """
    try:
        return _pkg_version("categorical-tree")
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).resolve().parent.parent / "pyproject.toml"
    if pyproject_path.is_file():
        try:
            data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError):
            data = {}
        project_version = data.get("project", {}).get("version")
        if isinstance(project_version, str) and project_version:
            return project_version

    return "0.0.0+unknown"


__version__: str = _detect_version()

__all__ = [
    "__version__",
    "DecisionTree",
    "Record",
    "RecordStore",
    "Leaf",
    "Split",
    "TreeNode",
    "build_tree",
]
