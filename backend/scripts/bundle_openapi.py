#!/usr/bin/env python
"""Bundle openapi/ fragments into openapi.json and openapi.yaml.

Usage (from the project root, or pass --root):
  python -m scripts.bundle_openapi
  python -m scripts.bundle_openapi --check

Same entry point as the installed `openapi-bundle` command; see
`openapi_bundler.cli` for options and exit codes.
"""
from __future__ import annotations
import pathlib, sys

# Allow running from repo root or backend/ directory
BACKEND = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))

from openapi_bundler.cli import main  # noqa: E402


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
