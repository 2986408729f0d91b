"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode


def _hex(value: int) -> str:
    """Render a byte value as 0xNN."""
    return f"0x{value:02X}"


def _point(offset: int) -> ByteSpan:
    """Span covering the single byte at offset."""
    return ByteSpan(start=offset, end=offset + 1)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Offsets are relative to the start of the cursor window, except for
    CSI structure problems, which count from the introducer.
    """

    # ------------------------------------------------------------------
    # Cursor contract violations
    # ------------------------------------------------------------------

    @staticmethod
    def cursor_exhausted(offset: int) -> Diagnostic:
        """Unchecked read past the end of the cursor window.

        Args:
            offset: Read position (bytes consumed so far)

        Returns:
            Diagnostic for CURSOR_EXHAUSTED
        """
        msg = f"Unexpected end of data at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_EXHAUSTED,
            message=msg,
            span=ByteSpan(start=offset, end=offset),
            hint="Check can_advance or use the try_* variant before reading",
        )

    @staticmethod
    def insufficient_bytes(requested: int, remaining: int, offset: int) -> Diagnostic:
        """advance_multiple() asked for more bytes than remain.

        Args:
            requested: Number of bytes requested
            remaining: Number of bytes left in the window
            offset: Read position

        Returns:
            Diagnostic for INSUFFICIENT_BYTES
        """
        msg = f"Cannot advance {requested} bytes: only {remaining} remaining"
        return Diagnostic(
            code=DiagnosticCode.INSUFFICIENT_BYTES,
            message=msg,
            span=ByteSpan(start=offset, end=offset + remaining),
            hint="Compare against remaining_length before advancing",
        )

    @staticmethod
    def unexpected_byte(expected: int, actual: int | None, offset: int) -> Diagnostic:
        """consume_or_fail() found a different byte, or none at all.

        Args:
            expected: Byte the caller asserted
            actual: Byte found, or None at end of data
            offset: Read position

        Returns:
            Diagnostic for UNEXPECTED_BYTE
        """
        found = "end of data" if actual is None else _hex(actual)
        msg = f"Expected byte {_hex(expected)}, found {found}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_BYTE,
            message=msg,
            span=_point(offset) if actual is not None else ByteSpan(start=offset, end=offset),
            hint="Verify the protocol marker before calling consume_or_fail()",
        )

    @staticmethod
    def backtrack_out_of_range(requested: int, consumed: int) -> Diagnostic:
        """backtrack_by() outside 0..consumed.

        Args:
            requested: Number of bytes requested
            consumed: Number of bytes consumed so far

        Returns:
            Diagnostic for BACKTRACK_OUT_OF_RANGE
        """
        msg = f"Cannot backtrack {requested} bytes: {consumed} consumed"
        return Diagnostic(
            code=DiagnosticCode.BACKTRACK_OUT_OF_RANGE,
            message=msg,
            span=ByteSpan(start=0, end=consumed),
            hint="Backtrack by at most bytes_consumed",
        )

    @staticmethod
    def invalid_byte_value(value: int) -> Diagnostic:
        """Integer argument is not a byte.

        Args:
            value: The offending value

        Returns:
            Diagnostic for INVALID_BYTE_VALUE
        """
        msg = f"Byte value must be in 0..255, got {value}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BYTE_VALUE,
            message=msg,
        )

    @staticmethod
    def invalid_window(offset: int, length: int, buffer_length: int) -> Diagnostic:
        """Cursor window does not fit inside the buffer.

        Args:
            offset: Requested start offset
            length: Requested window length
            buffer_length: Length of the underlying buffer

        Returns:
            Diagnostic for INVALID_WINDOW
        """
        msg = (
            f"Window offset={offset} length={length} "
            f"exceeds buffer of {buffer_length} bytes"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_WINDOW,
            message=msg,
            hint="Offset and length must satisfy 0 <= offset <= offset + length <= len(buffer)",
        )

    @staticmethod
    def negative_length(name: str, value: int) -> Diagnostic:
        """Length-like argument is negative.

        Args:
            name: Argument name
            value: The offending value

        Returns:
            Diagnostic for NEGATIVE_LENGTH
        """
        msg = f"{name} must be >= 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_LENGTH,
            message=msg,
        )

    # ------------------------------------------------------------------
    # Parameter set contract violations
    # ------------------------------------------------------------------

    @staticmethod
    def parameter_index_out_of_range(index: int, capacity: int) -> Diagnostic:
        """Parameter slot index outside the fixed capacity.

        Args:
            index: Requested slot
            capacity: Number of slots

        Returns:
            Diagnostic for PARAMETER_INDEX_OUT_OF_RANGE
        """
        msg = f"Parameter index {index} outside 0..{capacity - 1}"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_INDEX_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def subparameter_owner_invalid(index: int, count: int) -> Diagnostic:
        """Sub-parameter added to a parameter that does not exist.

        Args:
            index: Owning parameter index
            count: Current parameter count

        Returns:
            Diagnostic for SUBPARAMETER_OWNER_INVALID
        """
        msg = f"Sub-parameter owner {index} is not an existing parameter (count={count})"
        return Diagnostic(
            code=DiagnosticCode.SUBPARAMETER_OWNER_INVALID,
            message=msg,
            hint="Add the owning parameter before its sub-parameters",
        )

    @staticmethod
    def negative_parameter_value(value: int) -> Diagnostic:
        """Stored value is negative but not the unset sentinel.

        Args:
            value: The offending value

        Returns:
            Diagnostic for NEGATIVE_PARAMETER_VALUE
        """
        msg = f"Parameter values must be >= 0 or -1 (unset), got {value}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_PARAMETER_VALUE,
            message=msg,
        )

    @staticmethod
    def parameter_slots_invalid(length: int, capacity: int) -> Diagnostic:
        """Parameter slot list has the wrong length.

        Args:
            length: Length of the supplied slot list
            capacity: Required number of slots

        Returns:
            Diagnostic for PARAMETER_SLOTS_INVALID
        """
        msg = f"Parameter set needs exactly {capacity} slots, got {length}"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_SLOTS_INVALID,
            message=msg,
            hint="Construct CSIParam() without arguments and fill it with add_parameter()",
        )

    @staticmethod
    def parameter_count_out_of_range(count: int, capacity: int) -> Diagnostic:
        """Parameter count outside 0..capacity.

        Args:
            count: Supplied count
            capacity: Number of slots

        Returns:
            Diagnostic for PARAMETER_COUNT_OUT_OF_RANGE
        """
        msg = f"Parameter count must be in 0..{capacity}, got {count}"
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_COUNT_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def command_byte_out_of_range(name: str, value: int) -> Diagnostic:
        """Packed command component is not a byte.

        Args:
            name: Component name (prefix, intermediate, final)
            value: The offending value

        Returns:
            Diagnostic for COMMAND_BYTE_OUT_OF_RANGE
        """
        msg = f"Command {name} byte must be in 0..255, got {value}"
        return Diagnostic(
            code=DiagnosticCode.COMMAND_BYTE_OUT_OF_RANGE,
            message=msg,
        )

    # ------------------------------------------------------------------
    # CSI structure problems
    # ------------------------------------------------------------------

    @staticmethod
    def csi_integer_overflow(start: int, end: int) -> Diagnostic:
        """Numeric field exceeds MAX_INTEGER.

        Args:
            start: Offset of the first digit
            end: Offset after the last digit

        Returns:
            Diagnostic for CSI_INTEGER_OVERFLOW
        """
        msg = f"Numeric parameter of {end - start} digits overflows"
        return Diagnostic(
            code=DiagnosticCode.CSI_INTEGER_OVERFLOW,
            message=msg,
            span=ByteSpan(start=start, end=end),
            severity="warning",
        )

    @staticmethod
    def csi_misplaced_prefix(byte: int, offset: int) -> Diagnostic:
        """Private prefix byte after the first parameter byte.

        Args:
            byte: The prefix byte
            offset: Where it was found

        Returns:
            Diagnostic for CSI_MISPLACED_PREFIX
        """
        msg = f"Private prefix byte {_hex(byte)} is only valid first"
        return Diagnostic(
            code=DiagnosticCode.CSI_MISPLACED_PREFIX,
            message=msg,
            span=_point(offset),
            severity="warning",
        )

    @staticmethod
    def csi_extra_intermediate(byte: int, offset: int) -> Diagnostic:
        """Second intermediate byte in one sequence.

        Args:
            byte: The intermediate byte
            offset: Where it was found

        Returns:
            Diagnostic for CSI_EXTRA_INTERMEDIATE
        """
        msg = f"Unsupported second intermediate byte {_hex(byte)}"
        return Diagnostic(
            code=DiagnosticCode.CSI_EXTRA_INTERMEDIATE,
            message=msg,
            span=_point(offset),
            severity="warning",
        )

    @staticmethod
    def csi_parameter_after_intermediate(byte: int, offset: int) -> Diagnostic:
        """Parameter byte following an intermediate byte.

        Args:
            byte: The parameter byte
            offset: Where it was found

        Returns:
            Diagnostic for CSI_PARAMETER_AFTER_INTERMEDIATE
        """
        msg = f"Parameter byte {_hex(byte)} after intermediate byte"
        return Diagnostic(
            code=DiagnosticCode.CSI_PARAMETER_AFTER_INTERMEDIATE,
            message=msg,
            span=_point(offset),
            severity="warning",
        )

    @staticmethod
    def csi_aborted_by_control(byte: int, offset: int) -> Diagnostic:
        """Byte outside 0x20..0x7E interrupted the sequence.

        Args:
            byte: The interrupting byte (left unconsumed)
            offset: Where it was found

        Returns:
            Diagnostic for CSI_ABORTED_BY_CONTROL
        """
        msg = f"Control sequence interrupted by byte {_hex(byte)}"
        return Diagnostic(
            code=DiagnosticCode.CSI_ABORTED_BY_CONTROL,
            message=msg,
            span=_point(offset),
            hint="The interrupting byte was left unconsumed for the dispatcher",
            severity="warning",
        )
