"""Fixed-capacity CSI parameter set.

Accumulates the numeric parameters and colon-separated sub-parameters of
one CSI sequence as the scanner recognises them.

Capacity Policy:
    At most MAX_CSI_PARAMS parameters and MAX_CSI_SUBPARAMS sub-parameters
    (one budget shared by all parameters). Excess values are dropped and
    the add_* call returns False; the parse itself never fails. Terminals
    receive pathological sequences from untrusted programs and must keep
    the session alive.

Numeric Semantics:
    UNSET_PARAMETER (-1) marks a syntactically omitted value. Consumers
    substitute the protocol default; it is never the literal -1. All other
    stored values are non-negative.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from vtlexengine.constants import MAX_CSI_PARAMS, MAX_CSI_SUBPARAMS, UNSET_PARAMETER
from vtlexengine.diagnostics import ContractViolationError, ErrorTemplate

from .command import CSICommand

__all__ = ["CSIParam", "Subparameter"]


@dataclass(frozen=True, slots=True)
class Subparameter:
    """One sub-parameter record.

    Attributes:
        parameter_index: Index of the owning top-level parameter
        subparameter_index: Position within the owning parameter (dense from 0)
        value: Non-negative value or UNSET_PARAMETER
    """

    parameter_index: int
    subparameter_index: int
    value: int


def _check_value(value: int) -> None:
    if value < UNSET_PARAMETER:
        raise ContractViolationError(ErrorTemplate.negative_parameter_value(value))


@dataclass(slots=True, repr=False)
class CSIParam:
    """Structured parameters of one CSI sequence.

    Mutability Note:
        Intentionally mutable (not frozen=True): the scanner fills it in
        place. Once handed to a dispatcher it is treated as read-only.

    Thread Safety:
        Not thread-safe. Each parse attempt owns its own instance.

    Attributes:
        p: MAX_CSI_PARAMS slots; the first count are valid
        count: Number of slots in use
        cmd: Packed prefix/intermediate/final bytes (see csi.command)

    Example:
        >>> csi = CSIParam()
        >>> csi.add_parameter(38)
        True
        >>> csi.add_subparameter(0, 2)
        True
        >>> csi.add_parameter(UNSET_PARAMETER)
        True
        >>> csi.describe()
        '38:2;'
    """

    p: list[int] = field(default_factory=lambda: [UNSET_PARAMETER] * MAX_CSI_PARAMS)
    count: int = 0
    cmd: int = 0
    _subparameters: list[Subparameter] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        """Validate the slot list and count.

        Raises:
            ContractViolationError: If p does not have MAX_CSI_PARAMS slots,
                count is outside 0..MAX_CSI_PARAMS, or a slot holds a value
                below UNSET_PARAMETER
        """
        if len(self.p) != MAX_CSI_PARAMS:
            raise ContractViolationError(
                ErrorTemplate.parameter_slots_invalid(len(self.p), MAX_CSI_PARAMS)
            )
        if not 0 <= self.count <= MAX_CSI_PARAMS:
            raise ContractViolationError(
                ErrorTemplate.parameter_count_out_of_range(self.count, MAX_CSI_PARAMS)
            )
        for value in self.p:
            _check_value(value)

    def __repr__(self) -> str:
        return f"CSIParam({self.describe()!r}, command={str(self.command)!r})"

    def __str__(self) -> str:
        return self.describe()

    # ------------------------------------------------------------------
    # Top-level parameters
    # ------------------------------------------------------------------

    def add_parameter(self, value: int) -> bool:
        """Append value as the next parameter.

        Args:
            value: Non-negative value or UNSET_PARAMETER

        Returns:
            False (set unchanged) if MAX_CSI_PARAMS are already stored

        Raises:
            ContractViolationError: If value is below UNSET_PARAMETER
        """
        _check_value(value)
        if self.count >= MAX_CSI_PARAMS:
            return False
        self.p[self.count] = value
        self.count += 1
        return True

    def set_parameter_if_unset(self, index: int, value: int) -> None:
        """Apply a default to parameter index.

        Assigns value only if the slot holds UNSET_PARAMETER. count grows
        to at least index + 1; slots exposed by that growth stay unset.

        Args:
            index: Slot in 0..MAX_CSI_PARAMS-1
            value: Non-negative value or UNSET_PARAMETER

        Raises:
            ContractViolationError: If index or value is out of range
        """
        if not 0 <= index < MAX_CSI_PARAMS:
            raise ContractViolationError(
                ErrorTemplate.parameter_index_out_of_range(index, MAX_CSI_PARAMS)
            )
        _check_value(value)
        if self.p[index] == UNSET_PARAMETER:
            self.p[index] = value
        self.count = max(self.count, index + 1)

    def parameter(self, index: int) -> int:
        """Value of parameter index, or UNSET_PARAMETER beyond count."""
        if 0 <= index < self.count:
            return self.p[index]
        return UNSET_PARAMETER

    @property
    def parameters(self) -> tuple[int, ...]:
        """The first count parameter slots."""
        return tuple(self.p[: self.count])

    @property
    def command(self) -> CSICommand:
        """cmd unpacked into its component bytes."""
        return CSICommand.unpack(self.cmd)

    # ------------------------------------------------------------------
    # Sub-parameters
    # ------------------------------------------------------------------

    @property
    def num_subparameters(self) -> int:
        """Sub-parameters stored across all parameters."""
        return len(self._subparameters)

    @property
    def subparameters(self) -> tuple[Subparameter, ...]:
        """All sub-parameter records in insertion order."""
        return tuple(self._subparameters)

    def subparameter_count(self, parameter_index: int) -> int:
        """Number of sub-parameters owned by parameter_index."""
        return sum(1 for sub in self._subparameters if sub.parameter_index == parameter_index)

    def add_subparameter(self, parameter_index: int, value: int) -> bool:
        """Append a sub-parameter to parameter_index.

        Its position is the owner's current subparameter_count(), so
        positions stay dense per parameter however additions interleave.

        Args:
            parameter_index: Existing parameter, below count
            value: Non-negative value or UNSET_PARAMETER

        Returns:
            False (no-op) once MAX_CSI_SUBPARAMS are stored in total

        Raises:
            ContractViolationError: If the owner does not exist or value
                is below UNSET_PARAMETER
        """
        if not 0 <= parameter_index < self.count:
            raise ContractViolationError(
                ErrorTemplate.subparameter_owner_invalid(parameter_index, self.count)
            )
        _check_value(value)
        if len(self._subparameters) >= MAX_CSI_SUBPARAMS:
            return False
        position = self.subparameter_count(parameter_index)
        self._subparameters.append(Subparameter(parameter_index, position, value))
        return True

    def subparameter(self, parameter_index: int, position: int) -> int:
        """Value at position under parameter_index, or UNSET_PARAMETER if absent."""
        for sub in self._subparameters:
            if sub.parameter_index == parameter_index and sub.subparameter_index == position:
                return sub.value
        return UNSET_PARAMETER

    def all_subparameters(self, parameter_index: int) -> tuple[int, ...]:
        """Every sub-parameter value of parameter_index, in position order."""
        owned = [sub for sub in self._subparameters if sub.parameter_index == parameter_index]
        owned.sort(key=lambda sub: sub.subparameter_index)
        return tuple(sub.value for sub in owned)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Render as CSI parameter text.

        Unset values render as empty fields. Sub-parameters follow their
        parameter joined by ':'; parameters are joined by ';'. For logs
        and error messages only.

        Sub-parameters of an unset parameter are still rendered (":4"),
        unlike renderers that drop them, so the output keeps every field
        the scanner stored.

        Example:
            >>> csi = CSIParam()
            >>> for value in (38, UNSET_PARAMETER, 5):
            ...     _ = csi.add_parameter(value)
            >>> _ = csi.add_subparameter(0, 2)
            >>> _ = csi.add_subparameter(0, 255)
            >>> csi.describe()
            '38:2:255;;5'
        """
        fields: list[str] = []
        for index in range(self.count):
            parts = [_render(self.p[index])]

            by_position = {
                sub.subparameter_index: sub.value
                for sub in self._subparameters
                if sub.parameter_index == index
            }
            if by_position:
                for position in range(max(by_position) + 1):
                    parts.append(_render(by_position.get(position, UNSET_PARAMETER)))

            fields.append(":".join(parts))

        return ";".join(fields)


def _render(value: int) -> str:
    return "" if value == UNSET_PARAMETER else str(value)
