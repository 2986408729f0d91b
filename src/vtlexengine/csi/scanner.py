"""CSI structure scanner.

Drives a ByteCursor over one control sequence and fills a CSIParam:

    CSI  P...P  I  F
    |    |      |  final byte 0x40-0x7E
    |    |      intermediate byte 0x20-0x2F (at most one)
    |    parameter bytes: optional private prefix, digits, ';' and ':'
    ESC [ (7-bit) or 0x9B (8-bit)

Only structure is recognised. What a sequence means is the dispatcher's
business.

Incremental Input:
    When the window ends before the final byte, the cursor is rewound to
    the introducer and INCOMPLETE is returned, so the caller can keep the
    bytes and retry once more arrive.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from vtlexengine.constants import (
    CSI_7BIT_FINAL,
    CSI_8BIT,
    DIGIT_NINE,
    DIGIT_ZERO,
    ESC,
    FINAL_FIRST,
    FINAL_LAST,
    INTERMEDIATE_FIRST,
    INTERMEDIATE_LAST,
    PARAMETER_SEPARATOR,
    PRIVATE_PREFIX_BYTES,
    SUBPARAMETER_SEPARATOR,
    UNSET_PARAMETER,
)
from vtlexengine.diagnostics import Diagnostic, ErrorTemplate
from vtlexengine.syntax.cursor import ByteCursor

from .command import pack_command
from .params import CSIParam

__all__ = ["CSIScanResult", "ScanStatus", "parse_csi", "scan_csi"]

logger = logging.getLogger(__name__)

# Every byte that may appear in the parameter part: digits, ':', ';', '<=>?'
_PARAMETER_FIRST = DIGIT_ZERO
_PARAMETER_LAST = 0x3F


class ScanStatus(StrEnum):
    """Outcome of scan_csi()."""

    COMPLETE = "complete"  # Well-formed sequence, params ready
    INCOMPLETE = "incomplete"  # Need more bytes, cursor rewound
    INVALID = "invalid"  # Malformed, consumed bytes should be discarded
    NOT_CSI = "not_csi"  # No introducer at the read position


@dataclass(frozen=True, slots=True)
class CSIScanResult:
    """Result of scanning one CSI sequence.

    Attributes:
        status: Outcome
        params: Parameter set (COMPLETE and INVALID only)
        consumed: Bytes consumed from the introducer onwards
        diagnostic: First structural problem found (INVALID only)
    """

    status: ScanStatus
    params: CSIParam | None = None
    consumed: int = 0
    diagnostic: Diagnostic | None = None

    @property
    def is_complete(self) -> bool:
        """True if the sequence is complete and well-formed."""
        return self.status is ScanStatus.COMPLETE


def scan_csi(cursor: ByteCursor) -> CSIScanResult:
    """Scan one CSI sequence starting at the cursor's read position.

    Args:
        cursor: Cursor positioned at a possible introducer

    Returns:
        CSIScanResult. On COMPLETE and INVALID the cursor sits after the
        last consumed byte; on INCOMPLETE and NOT_CSI it is unchanged.

    Example:
        >>> result = parse_csi(b"\\x1b[38:2:255;;5m")
        >>> result.status, result.params.describe(), str(result.params.command)
        (<ScanStatus.COMPLETE: 'complete'>, '38:2:255;;5', 'm')
    """
    first = cursor.try_peek()
    if first is None:
        return CSIScanResult(ScanStatus.INCOMPLETE)

    start = cursor.bytes_consumed
    if first == CSI_8BIT:
        cursor.consume_or_fail(CSI_8BIT)
    elif first == ESC:
        raw = cursor.peek_raw_bytes(2)
        if raw is None:
            return CSIScanResult(ScanStatus.INCOMPLETE)
        second = raw[1]
        raw.release()
        if second != CSI_7BIT_FINAL:
            return CSIScanResult(ScanStatus.NOT_CSI)
        cursor.consume_or_fail(ESC)
        cursor.consume_or_fail(CSI_7BIT_FINAL)
    else:
        return CSIScanResult(ScanStatus.NOT_CSI)

    return _CSIBodyScanner(cursor, start).run()


def parse_csi(data: bytes | bytearray) -> CSIScanResult:
    """Scan a CSI sequence at the start of data.

    Convenience wrapper around scan_csi() for callers without a cursor.
    """
    return scan_csi(ByteCursor(data))


class _CSIBodyScanner:
    """Parameter/intermediate/final scanner for one sequence.

    Fields are closed by ';', ':' or the final byte. The field closed by
    ':' or ';' after a plain value becomes a parameter; fields after ':'
    become sub-parameters of the most recent parameter.
    """

    __slots__ = (
        "_cursor",
        "_diagnostic",
        "_field_value",
        "_in_subparameters",
        "_intermediate",
        "_owner",
        "_params",
        "_prefix",
        "_seen_parameter_bytes",
        "_start",
    )

    def __init__(self, cursor: ByteCursor, start: int) -> None:
        self._cursor = cursor
        self._start = start
        self._params = CSIParam()
        self._prefix = 0
        self._intermediate = 0
        self._diagnostic: Diagnostic | None = None
        self._seen_parameter_bytes = False
        self._field_value = UNSET_PARAMETER
        self._in_subparameters = False
        self._owner: int | None = None

    @property
    def _offset(self) -> int:
        return self._cursor.bytes_consumed - self._start

    def run(self) -> CSIScanResult:  # noqa: PLR0911, PLR0912 - one branch per byte class
        cursor = self._cursor
        body_start = self._offset

        while True:
            c = cursor.try_peek()
            if c is None:
                cursor.backtrack_by(self._offset)
                logger.debug("Incomplete CSI sequence: %s", cursor.debug_string())
                return CSIScanResult(ScanStatus.INCOMPLETE)

            offset = self._offset

            if self._intermediate and _PARAMETER_FIRST <= c <= _PARAMETER_LAST:
                cursor.advance()
                self._problem(ErrorTemplate.csi_parameter_after_intermediate(c, offset))
                continue

            if DIGIT_ZERO <= c <= DIGIT_NINE:
                number = cursor.consume_integer()
                self._seen_parameter_bytes = True
                if number.overflowed:
                    self._problem(ErrorTemplate.csi_integer_overflow(offset, self._offset))
                    self._field_value = UNSET_PARAMETER
                else:
                    self._field_value = number.value
                continue

            cursor.advance()

            if c == PARAMETER_SEPARATOR:
                self._seen_parameter_bytes = True
                self._close_field()
                self._in_subparameters = False
            elif c == SUBPARAMETER_SEPARATOR:
                self._seen_parameter_bytes = True
                self._close_field()
                self._in_subparameters = True
            elif c in PRIVATE_PREFIX_BYTES:
                if offset == body_start:
                    self._prefix = c
                else:
                    self._problem(ErrorTemplate.csi_misplaced_prefix(c, offset))
            elif INTERMEDIATE_FIRST <= c <= INTERMEDIATE_LAST:
                if self._intermediate:
                    self._problem(ErrorTemplate.csi_extra_intermediate(c, offset))
                else:
                    self._intermediate = c
            elif FINAL_FIRST <= c <= FINAL_LAST:
                return self._finish(c)
            else:
                # Left for the dispatcher: C0 controls, DEL, 8-bit bytes.
                cursor.backtrack_by(1)
                self._problem(ErrorTemplate.csi_aborted_by_control(c, offset))
                return self._result(ScanStatus.INVALID)

    def _close_field(self) -> None:
        value = self._field_value
        self._field_value = UNSET_PARAMETER
        params = self._params

        if not self._in_subparameters:
            if params.add_parameter(value):
                self._owner = params.count - 1
            else:
                self._owner = None
                logger.debug("CSI parameter dropped, capacity exhausted: %d", value)
        elif self._owner is not None and not params.add_subparameter(self._owner, value):
            logger.debug("CSI sub-parameter dropped, capacity exhausted: %d", value)

    def _finish(self, final: int) -> CSIScanResult:
        if self._seen_parameter_bytes:
            self._close_field()
        self._params.cmd = pack_command(
            final, prefix=self._prefix, intermediate=self._intermediate
        )
        if self._diagnostic is not None:
            return self._result(ScanStatus.INVALID)
        return self._result(ScanStatus.COMPLETE)

    def _problem(self, diagnostic: Diagnostic) -> None:
        if self._diagnostic is None:
            self._diagnostic = diagnostic

    def _result(self, status: ScanStatus) -> CSIScanResult:
        if status is ScanStatus.INVALID:
            logger.debug(
                "Invalid CSI sequence %r: %s",
                self._params.describe(),
                self._diagnostic,
            )
        return CSIScanResult(
            status=status,
            params=self._params,
            consumed=self._offset,
            diagnostic=self._diagnostic,
        )
