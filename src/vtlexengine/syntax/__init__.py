"""Byte-level syntax primitives.

Provides the byte cursor used by every decoder in the package.

Python 3.13+.
"""

from .cursor import ByteCursor, IntegerMatch

__all__ = [
    "ByteCursor",
    "IntegerMatch",
]
