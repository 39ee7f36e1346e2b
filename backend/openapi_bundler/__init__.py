"""Bundle OpenAPI YAML fragments into one document.

The Flask preview server lives in `openapi_bundler.preview` so the bundler
itself never imports Flask or loads a `.env` file.
"""
from .assembler import assemble, bundle, load_fragment_directory  # noqa: F401
from .config.layout import BundleLayout  # noqa: F401

__all__ = ["assemble", "bundle", "load_fragment_directory", "BundleLayout"]
