"""Serialization helpers for the bundler.

Kept tiny and side-effect free (apart from `write_text`) so output ordering
stays exactly the insertion order produced by the merge.
"""
from __future__ import annotations
import datetime
import hashlib
import json
import math
from pathlib import Path
from typing import Any, Dict, Sequence

import yaml

from ..errors import BundleError, FragmentError


def _key_text(key: Any) -> str:
    # YAML allows non-string keys (`200:`, `true:`); the JSON output cannot.
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def stringify_keys(value: Any) -> Any:
    """Return `value` with every mapping key converted to a string, recursively."""
    if isinstance(value, dict):
        return {_key_text(k): stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [stringify_keys(v) for v in value]
    return value


def load_yaml_file(path: Path) -> Any:
    """Parse one YAML file; parser failures become `FragmentError` naming the file."""
    try:
        # binary mode: the YAML reader detects the encoding and reports bad bytes as ReaderError
        with open(path, "rb") as f:
            return stringify_keys(yaml.safe_load(f))
    except yaml.YAMLError as e:
        raise FragmentError(path, f"invalid YAML ({e.__class__.__name__})\n{e}") from e


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {value.__class__.__name__} is not JSON serializable")


def finite_floats(value: Any) -> Any:
    """Return `value` with NaN/Infinity replaced by None (JSON has no token for them)."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: finite_floats(v) for k, v in value.items()}
    if isinstance(value, list):
        return [finite_floats(v) for v in value]
    return value


def _dump_json(document: Dict[str, Any], **kwargs: Any) -> str:
    try:
        return json.dumps(finite_floats(document), allow_nan=False, default=_json_default, **kwargs)
    except (TypeError, ValueError) as e:
        raise BundleError(f"document cannot be serialized to JSON: {e}") from e


def render_json(document: Dict[str, Any]) -> str:
    return _dump_json(document, indent=2, ensure_ascii=False) + "\n"


def render_yaml(document: Dict[str, Any]) -> str:
    return yaml.safe_dump(
        document,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )


def write_text(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def get_section(document: Dict[str, Any], section: Sequence[str]) -> Any:
    node: Any = document
    for part in section:
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node


def section_count(document: Dict[str, Any], section: Sequence[str]) -> int:
    node = get_section(document, section)
    return len(node) if isinstance(node, dict) else 0


def document_hash(document: Dict[str, Any]) -> str:
    blob = _dump_json(document, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


__all__ = [
    "stringify_keys",
    "finite_floats",
    "load_yaml_file",
    "render_json",
    "render_yaml",
    "write_text",
    "get_section",
    "section_count",
    "document_hash",
]
