# ruff: noqa
"""Configuration file for the Sphinx documentation builder.

For the full list of built-in configuration values, see the documentation:
https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

import os
import sys
from datetime import date

sys.path.insert(0, os.path.abspath("../.."))

project = "Categorical Tree"
copyright = f"{date.today().year}, Categorical Tree contributors"
author = "Categorical Tree contributors"
release = "0.1.0"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.autosummary",
    "sphinx_autodoc_typehints",
    "sphinxcontrib.autodoc_pydantic",
    "myst_parser",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pandas": ("https://pandas.pydata.org/pandas-docs/stable", None),
    "numpy": ("https://numpy.org/doc/stable", None),
    "pydantic": ("https://docs.pydantic.dev/latest", None),
}

autodoc_typehints = "description"
autosummary_generate = True
typehints_use_signature = False
typehints_fully_qualified = False
autoclass_content = "class"
autodoc_member_order = "groupwise"
python_use_unqualified_type_names = True
add_module_names = False
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": True,
}

# Google-style docstrings
napoleon_google_docstring = True
napoleon_use_param = True
napoleon_use_rtype = True

autodoc_pydantic_model_show_json = False
autodoc_pydantic_model_show_config_summary = False
autodoc_pydantic_field_doc_policy = "description"

nitpick_ignore = [
    ("py:class", "TreeNode"),
    ("py:class", "DomainTable"),
    ("py:class", "AttributeDomain"),
]

exclude_patterns = []

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

# -- Options for HTML output ------------------------------------------------
html_theme = "pydata_sphinx_theme"
html_title = "Categorical Tree"
html_theme_options = {"navigation_depth": 3}
