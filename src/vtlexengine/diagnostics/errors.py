"""VTLexEngine exception hierarchy with structured diagnostics.

Only programmer errors are raised. Untrusted-input problems (short
buffers, capacity exhaustion, integer overflow, malformed sequences)
are reported through return values.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class VTLexError(Exception):
    """Base exception for all VTLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize VTLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ContractViolationError(VTLexError):
    """Caller broke a precondition of the cursor or parameter set.

    Indicates the decode loop's own logic is inconsistent with cursor
    state, not bad external input. The current parse must be abandoned.

    Examples:
    - advance_multiple() with fewer bytes remaining than requested
    - consume_or_fail() on a mismatching byte
    - add_subparameter() for a parameter that does not exist yet
    """


class CursorExhaustedError(ContractViolationError, EOFError):
    """Unchecked read on a cursor with no remaining bytes.

    Also an EOFError so generic end-of-input handlers still catch it.
    Use the try_* variants when exhaustion is an expected condition.
    """
