"""Runtime resolution: lexeme derivation, qualification and lookup.

Submodules:
    lexeme        - identify() and qualify()
    interpolation - interpolate() and lookup() with fallback policy

Python 3.13+.
"""

from .interpolation import Bindings, MissingKeyInfo, interpolate, lookup
from .lexeme import Metadata, identify, qualify

__all__ = [
    "Bindings",
    "Metadata",
    "MissingKeyInfo",
    "identify",
    "interpolate",
    "lookup",
    "qualify",
]
