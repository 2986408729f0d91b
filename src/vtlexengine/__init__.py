"""VTLexEngine - incremental decoding primitives for terminal control sequences.

A byte cursor with explicit backtracking and a bounded structured model of
CSI parameters. Recognises structure only (bytes, integers, parameter
boundaries); interpreting a sequence is left to the caller.

Public API:
    ByteCursor - Forward cursor with backtracking over a borrowed byte window
    IntegerMatch - Result of ByteCursor.consume_integer()
    CSIParam - Fixed-capacity CSI parameter and sub-parameter set
    CSICommand - Unpacked prefix/intermediate/final command bytes
    scan_csi - Scan one CSI sequence from a ByteCursor
    parse_csi - Scan one CSI sequence from bytes
    ScanStatus - Outcome of a scan (complete, incomplete, invalid, not_csi)

Exceptions:
    VTLexError - Base exception class
    ContractViolationError - Caller broke a cursor or parameter set precondition
    CursorExhaustedError - Unchecked read of an exhausted cursor

Submodules:
    vtlexengine.syntax - ByteCursor
    vtlexengine.csi - Parameter set, command packing, scanner
    vtlexengine.diagnostics - Error codes, templates and formatting
    vtlexengine.constants - Capacities, sentinels and byte classes
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .csi import CSICommand, CSIParam, CSIScanResult, ScanStatus, parse_csi, scan_csi
from .diagnostics import ContractViolationError, CursorExhaustedError, VTLexError
from .syntax import ByteCursor, IntegerMatch

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("vtlexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ByteCursor",
    "CSICommand",
    "CSIParam",
    "CSIScanResult",
    "ContractViolationError",
    "CursorExhaustedError",
    "IntegerMatch",
    "ScanStatus",
    "VTLexError",
    "__version__",
    "parse_csi",
    "scan_csi",
]
