"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from vtlexengine.constants import C1_FIRST, C1_LAST, DEL

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "caret_notation",
]

# C0 controls and DEL -> "^@".."^_", "^?"
_CARET_TABLE: dict[int, str] = {code: "^" + chr(code + 0x40) for code in range(0x20)}
_CARET_TABLE[DEL] = "^?"
# C1 controls -> their 7-bit ESC Fe form in caret notation (U+009B CSI -> "^[[")
_CARET_TABLE.update({code: "^[" + chr(code - 0x40) for code in range(C1_FIRST, C1_LAST + 1)})


def caret_notation(text: str) -> str:
    """Replace control characters with their caret-letter form.

    Used for log lines and error messages so that raw escape sequences
    never reach a terminal that displays the log.

    Example:
        >>> caret_notation("\\x1b[1;2H")
        '^[[1;2H'
        >>> caret_notation("tab\\there\\x7f")
        'tab^Ihere^?'
        >>> caret_notation("\\x9b2J")
        '^[[2J'
    """
    return text.translate(_CARET_TABLE)


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Message and hint text always pass through
    caret_notation(); sanitize additionally truncates them.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to keep log lines bounded
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.unexpected_byte(0x5B, 0x41, 1)
        >>> print(formatter.format(diagnostic))
        error[UNEXPECTED_BYTE]: Expected byte 0x5B, found 0x41
          --> bytes 1..2
          = help: Verify the protocol marker before calling consume_or_fail()

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        UNEXPECTED_BYTE: Expected byte 0x5B, found 0x41
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[CURSOR_EXHAUSTED]: Unexpected end of data at offset 3
              --> bytes 3..3
              = help: Check can_advance or use the try_* variant before reading
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._clean(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> bytes {diagnostic.span.start}..{diagnostic.span.end}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            CURSOR_EXHAUSTED: Unexpected end of data at offset 3
        """
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "CURSOR_EXHAUSTED", "code_value": 1001, "message": "...", ...}
        """
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clean(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = self._clean(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then truncate if sanitizing.

        Args:
            text: Text to clean

        Returns:
            Escaped and possibly truncated text
        """
        text = caret_notation(text)
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
