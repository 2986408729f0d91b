"""Diagnostic codes and data structures.

Defines error codes, byte spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Cursor contract violations (decode-loop bugs)
        2000-2999: Parameter set contract violations (decode-loop bugs)
        3000-3999: CSI structure problems (untrusted input, non-fatal)
    """

    # Cursor contract violations (1000-1999)
    CURSOR_EXHAUSTED = 1001
    INSUFFICIENT_BYTES = 1002
    UNEXPECTED_BYTE = 1003
    BACKTRACK_OUT_OF_RANGE = 1004
    INVALID_BYTE_VALUE = 1005
    INVALID_WINDOW = 1006
    NEGATIVE_LENGTH = 1007

    # Parameter set contract violations (2000-2999)
    PARAMETER_INDEX_OUT_OF_RANGE = 2001
    SUBPARAMETER_OWNER_INVALID = 2002
    NEGATIVE_PARAMETER_VALUE = 2003
    COMMAND_BYTE_OUT_OF_RANGE = 2004
    PARAMETER_SLOTS_INVALID = 2005
    PARAMETER_COUNT_OUT_OF_RANGE = 2006

    # CSI structure problems (3000-3999)
    CSI_INTEGER_OVERFLOW = 3001
    CSI_MISPLACED_PREFIX = 3002
    CSI_EXTRA_INTERMEDIATE = 3003
    CSI_PARAMETER_AFTER_INTERMEDIATE = 3004
    CSI_ABORTED_BY_CONTROL = 3005


@dataclass(frozen=True, slots=True)
class ByteSpan:
    """Byte range for error reporting.

    Offsets are relative to the start of the cursor window, not to the
    underlying buffer.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate ByteSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"ByteSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"ByteSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    log lines and test assertions without re-parsing message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Byte range within the cursor window (None when not applicable)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: ByteSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[UNEXPECTED_BYTE]: Expected byte 0x5B, found 0x41
              --> bytes 1..2
              = help: Verify the protocol marker before calling consume_or_fail()

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
