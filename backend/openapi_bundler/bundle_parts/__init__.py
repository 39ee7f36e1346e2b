"""Modular pieces for the fragment bundler.

Constants describing the fragment layout and the small serialization helpers
the assembler imports live here so `assembler.py` stays focused on merging.
"""

__all__ = [
    "constants",
    "helpers",
]
