"""Plain data carriers passed between the assembler, the CLI and the preview app."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class KeyCollision:
    category: str
    key: str
    first_source: Path
    second_source: Path

    def describe(self) -> str:
        return (
            f"{self.category}: '{self.key}' from {self.first_source.name} "
            f"overridden by {self.second_source.name}"
        )


@dataclass
class BundleResult:
    document: Dict[str, Any]
    collisions: List[KeyCollision] = field(default_factory=list)
    # fragment keys contributed per category (before splicing into the base)
    loaded: Dict[str, int] = field(default_factory=dict)
    security_schemes_loaded: bool = False
    json_path: Optional[Path] = None
    yaml_path: Optional[Path] = None


__all__ = ["KeyCollision", "BundleResult"]
