"""Exceptions raised by the bundler.

The library only raises; the CLI maps these to exit codes and the preview
app maps them to JSON error responses.
"""
from __future__ import annotations
from pathlib import Path
from typing import Sequence, Union

from .models import KeyCollision


class BundleError(Exception):
    """Base class for every bundling failure."""


class BaseDocumentNotFound(BundleError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{self.path.name} not found at {self.path}")


class FragmentError(BundleError):
    """A fragment, the base document or the security file could not be used."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DuplicateKeyError(BundleError):
    """Raised in strict mode when fragment files of one category share keys."""

    def __init__(self, collisions: Sequence[KeyCollision]):
        self.collisions = list(collisions)
        super().__init__(
            "duplicate fragment keys:\n  " + "\n  ".join(c.describe() for c in self.collisions)
        )


__all__ = ["BundleError", "BaseDocumentNotFound", "FragmentError", "DuplicateKeyError"]
