"""Centralized constants for the fragment bundler.

The layout is fixed relative to the project root; `config/layout.py` turns
these relative locations into absolute paths.
"""
from typing import List, NamedTuple, Tuple

FRAGMENT_EXTENSION = ".yaml"

SOURCE_DIR = "openapi"
BASE_FILE = "base.yaml"
SECURITY_SCHEMES_FILE = "components/security-schemes.yaml"

OUTPUT_JSON = "openapi.json"
OUTPUT_YAML = "openapi.yaml"


class FragmentCategory(NamedTuple):
    """One directory of fragments and where its keys land in the base document."""

    name: str
    directory: str
    target: Tuple[str, ...]
    label: str


# Processing order matches the order sections are reported in the summary.
CATEGORIES: List[FragmentCategory] = [
    FragmentCategory("paths", "paths", ("paths",), "path"),
    FragmentCategory("schemas", "components/schemas", ("components", "schemas"), "schema"),
    FragmentCategory("parameters", "components/parameters", ("components", "parameters"), "parameter"),
    FragmentCategory("responses", "components/responses", ("components", "responses"), "response"),
    FragmentCategory("examples", "examples", ("components", "examples"), "example"),
]

SECURITY_SCHEMES_TARGET: Tuple[str, ...] = ("components", "securitySchemes")

# Sections counted in the run summary: (label, section path)
SUMMARY_SECTIONS: List[Tuple[str, Tuple[str, ...]]] = [
    ("Paths", ("paths",)),
    ("Schemas", ("components", "schemas")),
    ("Parameters", ("components", "parameters")),
    ("Responses", ("components", "responses")),
    ("Examples", ("components", "examples")),
]

__all__ = [
    "FRAGMENT_EXTENSION",
    "SOURCE_DIR",
    "BASE_FILE",
    "SECURITY_SCHEMES_FILE",
    "OUTPUT_JSON",
    "OUTPUT_YAML",
    "FragmentCategory",
    "CATEGORIES",
    "SECURITY_SCHEMES_TARGET",
    "SUMMARY_SECTIONS",
]
