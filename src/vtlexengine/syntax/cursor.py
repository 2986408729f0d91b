"""Byte cursor infrastructure for incremental escape-sequence decoding.

Implements an in-place advancing cursor over a caller-owned byte window.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor borrows the buffer; it never copies or owns the bytes
    - Every position change goes through advance/consume/backtrack
    - consumed bytes always precede the read position, so backtrack_all()
      returns to the starting offset
    - Unchecked fast-path reads raise on misuse; try_* variants return
      None/False for "no data yet"

Failure Model:
    Contract violations (advance_multiple() past the end, consume_or_fail()
    mismatch, unchecked read of an exhausted cursor) raise
    ContractViolationError. They mean the decode loop is wrong, not the
    input. Everything else is an ordinary return value so callers can
    backtrack and wait for more bytes.

Buffer Lifetime:
    The buffer must not be mutated while a cursor is alive over it.
    Views returned by peek_raw_bytes() pin a bytearray against resizing
    until they are released.
"""

from dataclasses import dataclass

from vtlexengine.constants import DIGIT_NINE, DIGIT_ZERO, MAX_BYTE, MAX_INTEGER
from vtlexengine.diagnostics import (
    ContractViolationError,
    CursorExhaustedError,
    ErrorTemplate,
    caret_notation,
)

__all__ = ["ByteCursor", "IntegerMatch"]


@dataclass(frozen=True, slots=True)
class IntegerMatch:
    """Result of ByteCursor.consume_integer().

    Attributes:
        matched: True if at least one digit was consumed
        value: Accumulated value; a partial result when overflowed is True
        overflowed: True if the numeral exceeded MAX_INTEGER

    Callers must check overflowed before trusting value.
    """

    matched: bool
    value: int
    overflowed: bool


class ByteCursor:
    """Forward cursor with explicit backtracking over a byte window.

    Key Design Decisions:
        1. Slots - one cursor is created per decode attempt
        2. Three integers - start, read position and end of the window
        3. Borrowed source - bytes or bytearray, never copied
        4. Checked and unchecked variants of every read

    Example:
        >>> cursor = ByteCursor(b"\\x1b[12;5H")
        >>> cursor.consume()
        27
        >>> cursor.consume_or_fail(ord("["))
        >>> cursor.consume_integer()
        IntegerMatch(matched=True, value=12, overflowed=False)
        >>> cursor.bytes_consumed
        4
        >>> cursor.backtrack_all()
        >>> cursor.remaining_length
        8

    Thread Safety:
        Not thread-safe. Each decode attempt owns its cursor.
    """

    __slots__ = ("_end", "_pos", "_source", "_start")

    def __init__(
        self,
        source: bytes | bytearray,
        offset: int = 0,
        length: int | None = None,
    ) -> None:
        """Wrap a window of source.

        Args:
            source: Caller-owned buffer
            offset: Index of the first byte of the window
            length: Window length (default: rest of the buffer)

        Raises:
            ContractViolationError: If the window does not fit in source
        """
        buffer_length = len(source)
        if length is None:
            length = buffer_length - offset
        if offset < 0 or length < 0 or offset + length > buffer_length:
            raise ContractViolationError(
                ErrorTemplate.invalid_window(offset, length, buffer_length)
            )
        self._source = source
        self._start = offset
        self._pos = offset
        self._end = offset + length

    def __repr__(self) -> str:
        return (
            f"ByteCursor(consumed={self.bytes_consumed}, "
            f"remaining={self.remaining_length}, window={self.debug_string()!r})"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def source(self) -> bytes | bytearray:
        """The borrowed buffer."""
        return self._source

    @property
    def offset(self) -> int:
        """Absolute index of the next unread byte in source."""
        return self._pos

    @property
    def can_advance(self) -> bool:
        """True iff at least one byte remains."""
        return self._pos < self._end

    @property
    def remaining_length(self) -> int:
        """Number of unread bytes in the window."""
        return self._end - self._pos

    @property
    def bytes_consumed(self) -> int:
        """Number of bytes consumed since creation or the last full backtrack."""
        return self._pos - self._start

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def peek(self) -> int:
        """Return the next byte without consuming it.

        Raises:
            CursorExhaustedError: If no bytes remain
        """
        if self._pos >= self._end:
            raise CursorExhaustedError(ErrorTemplate.cursor_exhausted(self.bytes_consumed))
        return self._source[self._pos]

    def try_peek(self) -> int | None:
        """Return the next byte, or None if no bytes remain."""
        if self._pos >= self._end:
            return None
        return self._source[self._pos]

    def advance(self) -> None:
        """Move past one byte.

        Raises:
            CursorExhaustedError: If no bytes remain
        """
        if self._pos >= self._end:
            raise CursorExhaustedError(ErrorTemplate.cursor_exhausted(self.bytes_consumed))
        self._pos += 1

    def try_advance(self) -> bool:
        """Move past one byte if possible.

        Returns:
            False (and no state change) if no bytes remain
        """
        if self._pos >= self._end:
            return False
        self._pos += 1
        return True

    def advance_multiple(self, n: int) -> None:
        """Move past n bytes.

        Args:
            n: Number of bytes; must not exceed remaining_length

        Raises:
            ContractViolationError: If n is negative or too large.
                Never truncates to the available bytes.
        """
        if n < 0:
            raise ContractViolationError(ErrorTemplate.negative_length("n", n))
        if n > self._end - self._pos:
            raise ContractViolationError(
                ErrorTemplate.insufficient_bytes(n, self.remaining_length, self.bytes_consumed)
            )
        self._pos += n

    def consume(self) -> int:
        """Return the next byte and move past it.

        Raises:
            CursorExhaustedError: If no bytes remain
        """
        c = self.peek()
        self._pos += 1
        return c

    def try_consume(self) -> int | None:
        """Return the next byte and move past it, or None if no bytes remain."""
        if self._pos >= self._end:
            return None
        c = self._source[self._pos]
        self._pos += 1
        return c

    def consume_or_fail(self, expected: int) -> None:
        """Consume one byte that must equal expected.

        Use for protocol markers the caller has already recognised.

        Args:
            expected: The byte value that must come next

        Raises:
            ContractViolationError: On mismatch or end of data. The
                mismatching byte has been consumed; abandon the parse.
        """
        offset = self.bytes_consumed
        actual = self.try_consume()
        if actual != expected:
            raise ContractViolationError(ErrorTemplate.unexpected_byte(expected, actual, offset))

    def peek_raw_bytes(self, length: int) -> memoryview | None:
        """Borrow the next length bytes without consuming them.

        Args:
            length: Number of bytes wanted

        Returns:
            Zero-copy view over source, or None if fewer bytes remain.
            The view must not be kept beyond the current decode attempt.

        Raises:
            ContractViolationError: If length is negative
        """
        if length < 0:
            raise ContractViolationError(ErrorTemplate.negative_length("length", length))
        if self._end - self._pos < length:
            return None
        return memoryview(self._source)[self._pos : self._pos + length]

    def bytes_until(self, byte: int) -> int | None:
        """Distance from the read position to the next occurrence of byte.

        Searches only the remaining window and consumes nothing.

        Args:
            byte: Byte value to find

        Returns:
            Offset from the read position, or None if absent

        Raises:
            ContractViolationError: If byte is not in 0..255
        """
        if not 0 <= byte <= MAX_BYTE:
            raise ContractViolationError(ErrorTemplate.invalid_byte_value(byte))
        index = self._source.find(byte, self._pos, self._end)
        if index < 0:
            return None
        return index - self._pos

    def consume_integer(self) -> IntegerMatch:
        """Consume a run of ASCII decimal digits.

        Accumulates a base-10 value. Once the next multiply-and-add would
        exceed MAX_INTEGER, overflowed is set and value stops changing, but
        the remaining digits are still consumed so the cursor ends up after
        the whole numeral.

        Returns:
            IntegerMatch; matched is False (cursor unchanged) if the next
            byte is not a digit or no bytes remain

        Example:
            >>> cursor = ByteCursor(b"123abc")
            >>> cursor.consume_integer()
            IntegerMatch(matched=True, value=123, overflowed=False)
            >>> chr(cursor.peek())
            'a'
        """
        source = self._source
        pos = self._pos
        end = self._end
        value = 0
        overflowed = False

        while pos < end:
            c = source[pos]
            if not DIGIT_ZERO <= c <= DIGIT_NINE:
                break
            digit = c - DIGIT_ZERO
            if not overflowed:
                if value > (MAX_INTEGER - digit) // 10:
                    overflowed = True
                else:
                    value = value * 10 + digit
            pos += 1

        matched = pos > self._pos
        self._pos = pos
        return IntegerMatch(matched=matched, value=value, overflowed=overflowed)

    # ------------------------------------------------------------------
    # Backtracking
    # ------------------------------------------------------------------

    def backtrack_by(self, n: int) -> None:
        """Move the read position back by n bytes.

        Args:
            n: Number of bytes, 0 <= n <= bytes_consumed

        Raises:
            ContractViolationError: If n is out of range
        """
        if not 0 <= n <= self._pos - self._start:
            raise ContractViolationError(
                ErrorTemplate.backtrack_out_of_range(n, self.bytes_consumed)
            )
        self._pos -= n

    def backtrack_all(self) -> None:
        """Rewind to the start of the window."""
        self._pos = self._start

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def debug_string(self) -> str:
        """Render the remaining window for logs.

        Decodes as UTF-8 (invalid sequences replaced) and shows control
        characters in caret notation. Never use the result for parsing.

        Example:
            >>> ByteCursor(b"\\x1b[31mred").debug_string()
            '^[[31mred'
        """
        raw = bytes(self._source[self._pos : self._end])
        return caret_notation(raw.decode("utf-8", errors="replace"))
