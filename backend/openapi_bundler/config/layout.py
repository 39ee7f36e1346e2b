"""Input/output layout of a bundling run.

Every location is fixed relative to a project root; callers only choose the
root (the current directory by default).
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from ..bundle_parts.constants import (
    BASE_FILE,
    CATEGORIES,
    FRAGMENT_EXTENSION,
    OUTPUT_JSON,
    OUTPUT_YAML,
    SECURITY_SCHEMES_FILE,
    SOURCE_DIR,
)


@dataclass(frozen=True)
class BundleLayout:
    root: Path
    base_file: Path
    category_dirs: Dict[str, Path]
    security_schemes_file: Path
    json_output: Path
    yaml_output: Path
    extension: str = FRAGMENT_EXTENSION

    @classmethod
    def from_root(cls, root: Optional[Union[str, Path]] = None) -> "BundleLayout":
        root_path = Path(root if root is not None else Path.cwd()).resolve()
        source = root_path / SOURCE_DIR
        return cls(
            root=root_path,
            base_file=source / BASE_FILE,
            category_dirs={c.name: source / c.directory for c in CATEGORIES},
            security_schemes_file=source / SECURITY_SCHEMES_FILE,
            json_output=root_path / OUTPUT_JSON,
            yaml_output=root_path / OUTPUT_YAML,
        )

    def category_dir(self, name: str) -> Path:
        return self.category_dirs[name]


__all__ = ["BundleLayout"]
