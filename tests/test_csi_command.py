"""Tests for packed CSI command identifiers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import final_bytes, intermediate_bytes
from vtlexengine.constants import PRIVATE_PREFIX_BYTES
from vtlexengine.csi import CSICommand, pack_command
from vtlexengine.diagnostics import ContractViolationError, DiagnosticCode

# ============================================================================
# PACKING
# ============================================================================


class TestPackCommand:
    """Test pack_command() layout."""

    def test_final_only(self) -> None:
        """A bare final byte packs to itself."""
        assert pack_command(ord("m")) == ord("m")

    def test_private_prefix(self) -> None:
        """'?h' puts the prefix in bits 16-23."""
        assert pack_command(ord("h"), prefix=ord("?")) == (0x3F << 16) | 0x68 == 4128872

    def test_intermediate(self) -> None:
        """The intermediate byte goes in bits 8-15."""
        assert pack_command(ord("q"), intermediate=ord(" ")) == (0x20 << 8) | 0x71

    def test_all_components(self) -> None:
        """All three components occupy disjoint bytes."""
        packed = pack_command(ord("p"), prefix=ord(">"), intermediate=ord("$"))

        assert packed == 0x3E2470

    @pytest.mark.parametrize(
        ("kwargs", "name"),
        [
            ({"final": 256}, "final"),
            ({"final": -1}, "final"),
            ({"final": 0x6D, "prefix": 0x100}, "prefix"),
            ({"final": 0x6D, "intermediate": -3}, "intermediate"),
        ],
    )
    def test_component_out_of_range(self, kwargs: dict[str, int], name: str) -> None:
        """Components outside 0..255 are a contract violation."""
        with pytest.raises(ContractViolationError, match=f"Command {name} byte") as exc_info:
            pack_command(**kwargs)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.COMMAND_BYTE_OUT_OF_RANGE


# ============================================================================
# UNPACKING
# ============================================================================


class TestCSICommand:
    """Test CSICommand views of packed values."""

    def test_unpack(self) -> None:
        """unpack() splits a packed command."""
        command = CSICommand.unpack(0x3E2470)

        assert command == CSICommand(final=ord("p"), prefix=ord(">"), intermediate=ord("$"))

    def test_str_skips_absent_components(self) -> None:
        """str() shows only present bytes in wire order."""
        assert str(CSICommand(final=ord("m"))) == "m"
        assert str(CSICommand(final=ord("q"), intermediate=ord(" "))) == " q"
        assert str(CSICommand(final=ord("h"), prefix=ord("?"))) == "?h"

    def test_frozen(self) -> None:
        """CSICommand is immutable."""
        command = CSICommand(final=ord("m"))

        with pytest.raises(AttributeError):
            command.final = ord("n")  # type: ignore[misc]

    @given(
        final=final_bytes,
        prefix=st.sampled_from([0, *sorted(PRIVATE_PREFIX_BYTES)]),
        intermediate=st.one_of(st.just(0), intermediate_bytes),
    )
    def test_unpack_inverts_pack(self, final: int, prefix: int, intermediate: int) -> None:
        """PROPERTY: unpack(pack(x)) == x for every valid component triple."""
        packed = pack_command(final, prefix=prefix, intermediate=intermediate)

        assert CSICommand.unpack(packed) == CSICommand(final, prefix, intermediate)
