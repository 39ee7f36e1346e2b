"""Shape checks applied to every parsed document before it is merged."""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import FragmentError


def ensure_mapping(value: Any, source: Union[str, Path], what: str = "document") -> Dict[str, Any]:
    """Return `value` as a mapping.

    An empty file parses to None and contributes nothing; any other
    non-mapping top level (a list, a bare scalar) cannot be shallow-merged
    and raises `FragmentError`.
    """
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise FragmentError(source, f"{what} must be a mapping, got {type(value).__name__}")
    return value

__all__ = ['ensure_mapping']
