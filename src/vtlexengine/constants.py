"""Shared constants for VTLexEngine.

This module provides centralized configuration constants used across
the syntax and csi packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Capacity limits: Fixed sizes of the CSI parameter set
- Numeric limits: Integer scanning bounds and sentinels
- Byte values: Introducers and byte classes from ECMA-48

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Capacity limits
    "MAX_CSI_PARAMS",
    "MAX_CSI_SUBPARAMS",
    # Numeric limits
    "MAX_INTEGER",
    "UNSET_PARAMETER",
    "MAX_BYTE",
    # Byte values
    "ESC",
    "CSI_8BIT",
    "CSI_7BIT_FINAL",
    "DIGIT_ZERO",
    "DIGIT_NINE",
    "PARAMETER_SEPARATOR",
    "SUBPARAMETER_SEPARATOR",
    "PRIVATE_PREFIX_BYTES",
    "INTERMEDIATE_FIRST",
    "INTERMEDIATE_LAST",
    "FINAL_FIRST",
    "FINAL_LAST",
    "DEL",
    "C1_FIRST",
    "C1_LAST",
]

# ============================================================================
# CAPACITY LIMITS
# ============================================================================

# Maximum number of top-level CSI parameters.
# Real sequences rarely carry more than 5; the excess is dropped, not rejected.
MAX_CSI_PARAMS: int = 16

# Maximum number of CSI sub-parameters, shared by all parameters of a sequence.
MAX_CSI_SUBPARAMS: int = 16

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Largest value consume_integer() can represent (signed 32-bit INT_MAX).
# Terminal parameters are C ints on the wire side of every common emulator.
MAX_INTEGER: int = 2**31 - 1

# Sentinel for a parameter that was syntactically omitted.
# Consumers substitute the protocol default; it is never a literal -1.
UNSET_PARAMETER: int = -1

# Largest value of a single byte.
MAX_BYTE: int = 0xFF

# ============================================================================
# BYTE VALUES
# ============================================================================

ESC: int = 0x1B
CSI_8BIT: int = 0x9B
CSI_7BIT_FINAL: int = 0x5B  # '[' following ESC

DIGIT_ZERO: int = 0x30
DIGIT_NINE: int = 0x39

PARAMETER_SEPARATOR: int = 0x3B  # ';'
SUBPARAMETER_SEPARATOR: int = 0x3A  # ':'

# '<', '=', '>', '?' - only valid as the first parameter byte
PRIVATE_PREFIX_BYTES: frozenset[int] = frozenset({0x3C, 0x3D, 0x3E, 0x3F})

INTERMEDIATE_FIRST: int = 0x20
INTERMEDIATE_LAST: int = 0x2F

FINAL_FIRST: int = 0x40
FINAL_LAST: int = 0x7E

DEL: int = 0x7F

# C1 control range (8-bit CSI 0x9B lies inside it).
C1_FIRST: int = 0x80
C1_LAST: int = 0x9F
