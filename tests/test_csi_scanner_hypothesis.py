"""Hypothesis property-based tests for the CSI scanner.

Generated sequences carry their expected parameter text and command
bytes; the scanner must reproduce both, must treat every truncation as
INCOMPLETE, and must never raise on arbitrary bytes.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from tests.strategies import GeneratedCSI, csi_sequences
from vtlexengine.constants import MAX_CSI_PARAMS, MAX_CSI_SUBPARAMS, UNSET_PARAMETER
from vtlexengine.csi import ScanStatus, parse_csi, scan_csi
from vtlexengine.syntax.cursor import ByteCursor

# ============================================================================
# PROPERTY TESTS - WELL-FORMED SEQUENCES
# ============================================================================


class TestScannerRoundTrip:
    """Test that generated sequences scan back to their fields."""

    @given(generated=csi_sequences())
    def test_describe_reproduces_parameter_text(self, generated: GeneratedCSI) -> None:
        """PROPERTY: describe() of a scanned sequence equals its parameter text."""
        result = parse_csi(generated.data)

        assert result.status is ScanStatus.COMPLETE
        assert result.params is not None
        assert result.params.describe() == generated.parameter_text
        assert result.consumed == len(generated.data)

    @given(generated=csi_sequences())
    def test_command_components(self, generated: GeneratedCSI) -> None:
        """PROPERTY: the packed command holds the generated bytes."""
        result = parse_csi(generated.data)

        assert result.params is not None
        command = result.params.command
        assert command.final == generated.final
        assert command.prefix == generated.prefix
        assert command.intermediate == generated.intermediate

    @given(generated=csi_sequences())
    def test_parameter_values(self, generated: GeneratedCSI) -> None:
        """PROPERTY: each stored parameter matches its field."""
        result = parse_csi(generated.data)
        params = result.params
        assert params is not None

        if generated.parameter_text:
            expected = tuple(
                UNSET_PARAMETER if value is None else value for value, _ in generated.fields
            )
            assert params.parameters == expected
            for index, (_, subs) in enumerate(generated.fields):
                assert params.all_subparameters(index) == tuple(
                    UNSET_PARAMETER if sub is None else sub for sub in subs
                )
        else:
            assert params.count == 0
        event(f"params={params.count}")

    @given(generated=csi_sequences(), tail=st.binary(max_size=8))
    def test_trailing_bytes_untouched(self, generated: GeneratedCSI, tail: bytes) -> None:
        """PROPERTY: scanning stops right after the final byte."""
        cursor = ByteCursor(generated.data + tail)

        result = scan_csi(cursor)

        assert result.is_complete
        assert cursor.bytes_consumed == len(generated.data)
        assert cursor.remaining_length == len(tail)


# ============================================================================
# PROPERTY TESTS - TRUNCATION
# ============================================================================


class TestScannerTruncation:
    """Test that every truncation asks for more bytes."""

    @given(generated=csi_sequences(), data=st.data())
    def test_strict_prefix_is_incomplete(
        self, generated: GeneratedCSI, data: st.DataObject
    ) -> None:
        """PROPERTY: strict prefixes are INCOMPLETE with the cursor unchanged."""
        length = data.draw(st.integers(min_value=0, max_value=len(generated.data) - 1))
        cursor = ByteCursor(generated.data, length=length)

        result = scan_csi(cursor)

        assert result.status is ScanStatus.INCOMPLETE
        assert cursor.bytes_consumed == 0
        event(f"truncated_at={'introducer' if length <= 1 else 'body'}")


# ============================================================================
# PROPERTY TESTS - ARBITRARY INPUT
# ============================================================================


class TestScannerRobustness:
    """Test scanner behaviour on arbitrary bytes."""

    @given(body=st.binary(max_size=120))
    @settings(max_examples=300)
    def test_never_raises(self, body: bytes) -> None:
        """PROPERTY: arbitrary bytes after an introducer never raise."""
        cursor = ByteCursor(b"\x1b[" + body)

        result = scan_csi(cursor)

        event(f"status={result.status}")
        if result.status is ScanStatus.INCOMPLETE:
            assert cursor.bytes_consumed == 0
        else:
            assert result.params is not None
            assert cursor.bytes_consumed == result.consumed
            assert result.params.count <= MAX_CSI_PARAMS
            assert result.params.num_subparameters <= MAX_CSI_SUBPARAMS
            assert all(value >= UNSET_PARAMETER for value in result.params.parameters)

    @pytest.mark.fuzz
    @given(data=st.binary(max_size=512))
    @settings(max_examples=5000)
    def test_scan_loop_terminates(self, data: bytes) -> None:
        """PROPERTY: a decode loop over arbitrary bytes always makes progress."""
        cursor = ByteCursor(data)

        while cursor.can_advance:
            before = cursor.bytes_consumed
            result = scan_csi(cursor)
            if result.status in (ScanStatus.NOT_CSI, ScanStatus.INCOMPLETE):
                cursor.advance()
            elif result.consumed == 0:
                cursor.advance()
            assert cursor.bytes_consumed > before
