"""Packed CSI command identifiers.

A CSI command is identified by up to three bytes: an optional private
prefix ('<', '=', '>', '?'), an optional intermediate byte (0x20-0x2F)
and the final byte (0x40-0x7E). They are packed into one int so the
downstream dispatcher can switch on a single value:

    (prefix << 16) | (intermediate << 8) | final

A zero component means "absent".

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from vtlexengine.constants import MAX_BYTE
from vtlexengine.diagnostics import ContractViolationError, ErrorTemplate

__all__ = ["CSICommand", "pack_command"]


@dataclass(frozen=True, slots=True)
class CSICommand:
    """Unpacked view of CSIParam.cmd.

    Example:
        >>> CSICommand(final=ord("h"), prefix=ord("?")).packed
        4128872
        >>> str(CSICommand.unpack(4128872))
        '?h'
    """

    final: int
    prefix: int = 0
    intermediate: int = 0

    def __post_init__(self) -> None:
        """Validate that every component is a byte.

        Raises:
            ContractViolationError: If a component is outside 0..255
        """
        for name in ("prefix", "intermediate", "final"):
            value = getattr(self, name)
            if not 0 <= value <= MAX_BYTE:
                raise ContractViolationError(ErrorTemplate.command_byte_out_of_range(name, value))

    def __str__(self) -> str:
        return "".join(chr(b) for b in (self.prefix, self.intermediate, self.final) if b)

    @property
    def packed(self) -> int:
        """The packed integer form."""
        return (self.prefix << 16) | (self.intermediate << 8) | self.final

    @classmethod
    def unpack(cls, cmd: int) -> "CSICommand":
        """Split a packed command into its components."""
        return cls(
            final=cmd & 0xFF,
            prefix=(cmd >> 16) & 0xFF,
            intermediate=(cmd >> 8) & 0xFF,
        )


def pack_command(final: int, *, prefix: int = 0, intermediate: int = 0) -> int:
    """Pack command bytes into a single int.

    Args:
        final: Final byte
        prefix: Private prefix byte, 0 if absent
        intermediate: Intermediate byte, 0 if absent

    Returns:
        (prefix << 16) | (intermediate << 8) | final

    Raises:
        ContractViolationError: If a component is outside 0..255
    """
    return CSICommand(final=final, prefix=prefix, intermediate=intermediate).packed
