"""Fragment bundler: splice a directory tree of YAML fragments into one OpenAPI document.

Pipeline (single pass, all-or-nothing):
- load `openapi/base.yaml`
- per category, shallow-merge every `*.yaml` fragment of its directory
  (lexicographic file order, later file wins, collisions recorded)
- splice each category map into its section of the base document
  (fragment keys win over keys already present in the base)
- merge `components/security-schemes.yaml` when present
- write `openapi.json` and `openapi.yaml`

Outputs are written only after every merge step succeeded, so a malformed
fragment leaves previous outputs untouched.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .bundle_parts.constants import CATEGORIES, SECURITY_SCHEMES_TARGET, SUMMARY_SECTIONS
from .bundle_parts.helpers import load_yaml_file, render_json, render_yaml, section_count, write_text
from .config.layout import BundleLayout
from .errors import BaseDocumentNotFound, DuplicateKeyError
from .models import BundleResult, KeyCollision
from .utils.validation import ensure_mapping

logger = logging.getLogger(__name__)

__all__ = ["load_fragment_directory", "splice_section", "assemble", "bundle", "summarize"]


def _fragment_files(directory: Path, extension: str) -> List[Path]:
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.name.endswith(extension)),
        key=lambda p: p.name,
    )


def load_fragment_directory(
    directory: Path,
    category: Optional[str] = None,
    collisions: Optional[List[KeyCollision]] = None,
    extension: str = ".yaml",
) -> Dict[str, Any]:
    """Shallow-merge every fragment file in `directory` into one mapping.

    A missing directory yields an empty mapping. When two files define the
    same top-level key the later file (by name) wins; the override is logged
    and, if `collisions` is given, appended to it.
    """
    result: Dict[str, Any] = {}
    directory = Path(directory)
    if not directory.is_dir():
        logger.debug("Fragment directory %s not found, skipping", directory)
        return result

    sources: Dict[str, Path] = {}
    for path in _fragment_files(directory, extension):
        fragment = ensure_mapping(load_yaml_file(path), path, what="fragment")
        for key, value in fragment.items():
            if key in sources:
                clash = KeyCollision(category or directory.name, key, sources[key], path)
                logger.warning("Duplicate key %s", clash.describe())
                if collisions is not None:
                    collisions.append(clash)
            sources[key] = path
            result[key] = value
    return result


def _section_parent(document: Dict[str, Any], target: Sequence[str], source: Path) -> Dict[str, Any]:
    node = document
    for part in target[:-1]:
        if node.get(part) is None:
            node[part] = {}
        node = ensure_mapping(node[part], source, what=f"section '{part}'")
    return node


def splice_section(
    document: Dict[str, Any],
    target: Sequence[str],
    entries: Dict[str, Any],
    source: Path,
) -> Dict[str, Any]:
    """Shallow-merge `entries` into the section at `target`, fragment values winning.

    The section is always (re)assigned, so an absent section becomes `{}`.
    Keys already present keep their position; new keys are appended.
    """
    parent = _section_parent(document, target, source)
    name = target[-1]
    existing = ensure_mapping(parent.get(name), source, what=f"section '{'.'.join(target)}'")
    for key in entries:
        if key in existing:
            logger.debug("%s: fragment replaces base entry '%s'", ".".join(target), key)
    merged = dict(existing)
    merged.update(entries)
    parent[name] = merged
    return merged


def _load_base(layout: BundleLayout) -> Dict[str, Any]:
    if not layout.base_file.is_file():
        raise BaseDocumentNotFound(layout.base_file)
    base = ensure_mapping(load_yaml_file(layout.base_file), layout.base_file, what="base document")
    logger.info("Loaded %s", layout.base_file.name)
    return base


def assemble(layout: BundleLayout, strict: bool = False) -> BundleResult:
    """Build the composite document in memory without writing any output."""
    base = _load_base(layout)
    if base.get("components") is None:
        base["components"] = {}

    result = BundleResult(document=base)
    for category in CATEGORIES:
        entries = load_fragment_directory(
            layout.category_dir(category.name),
            category=category.name,
            collisions=result.collisions,
            extension=layout.extension,
        )
        splice_section(base, category.target, entries, layout.category_dir(category.name))
        result.loaded[category.name] = len(entries)
        logger.info("Loaded %d %s definitions", len(entries), category.label)

    if layout.security_schemes_file.is_file():
        schemes = ensure_mapping(
            load_yaml_file(layout.security_schemes_file),
            layout.security_schemes_file,
            what="security schemes",
        )
        splice_section(base, SECURITY_SCHEMES_TARGET, schemes, layout.security_schemes_file)
        result.security_schemes_loaded = True
        logger.info("Loaded security schemes")

    if strict and result.collisions:
        raise DuplicateKeyError(result.collisions)
    return result


def bundle(layout: Optional[BundleLayout] = None, strict: bool = False) -> BundleResult:
    """Assemble the composite document and write both output files."""
    layout = layout or BundleLayout.from_root()
    result = assemble(layout, strict=strict)
    document = result.document

    # render both before writing either so the two files never disagree
    json_text = render_json(document)
    yaml_text = render_yaml(document)
    result.json_path = write_text(layout.json_output, json_text)
    logger.info("Written JSON spec to: %s", result.json_path)
    result.yaml_path = write_text(layout.yaml_output, yaml_text)
    logger.info("Written YAML spec to: %s", result.yaml_path)

    for line in summarize(result):
        logger.info(line)
    return result


def summarize(result: BundleResult) -> List[str]:
    lines = ["Summary:"]
    for label, section in SUMMARY_SECTIONS:
        lines.append(f"   {label}: {section_count(result.document, section)}")
    if result.collisions:
        lines.append(f"   Duplicate keys: {len(result.collisions)}")
        lines.extend(f"     - {c.describe()}" for c in result.collisions)
    return lines
