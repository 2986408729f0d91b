"""Diagnostic system for VTLexEngine errors.

Provides structured error diagnostics with codes, byte spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode
from .errors import ContractViolationError, CursorExhaustedError, VTLexError
from .formatter import DiagnosticFormatter, OutputFormat, caret_notation
from .templates import ErrorTemplate

__all__ = [
    "ByteSpan",
    "ContractViolationError",
    "CursorExhaustedError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "VTLexError",
    "caret_notation",
]
