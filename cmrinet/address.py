"""Node addresses on a CMRInet network."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from .errors import InvalidNodeAddressError, InvalidUnitAddressError

#: Valid speeds for serial communications.
BAUDS: tuple[int, ...] = (9_600, 19_200, 28_800, 57_600, 115_200)
#: Default speed for serial communications.
DEFAULT_BAUD: int = 19_200

_MAX_NODE_ADDRESS = 127
_UNIT_OFFSET = 65


@dataclass(frozen=True, order=True, repr=False)
class Address:
    """The address of a packet or node.

    Holds the node address (human facing, 0 to 127) and converts to and from
    the unit address (the byte on the wire, 65 to 192).
    """

    value: int

    def __post_init__(self) -> None:
        value = operator.index(self.value)
        if not 0 <= value <= _MAX_NODE_ADDRESS:
            raise InvalidNodeAddressError(value)
        object.__setattr__(self, "value", value)

    @classmethod
    def from_node_address(cls, address: int) -> Address:
        """Create an address from a node address (0 to 127 inclusive)."""
        return cls(address)

    @classmethod
    def from_unit_address(cls, address: int) -> Address:
        """Create an address from a unit address (65 to 192 inclusive)."""
        address = operator.index(address)
        if not _UNIT_OFFSET <= address <= _UNIT_OFFSET + _MAX_NODE_ADDRESS:
            raise InvalidUnitAddressError(address)
        return cls(address - _UNIT_OFFSET)

    @property
    def node_address(self) -> int:
        """The address in human facing form."""
        return self.value

    @property
    def unit_address(self) -> int:
        """The address in on-the-wire form."""
        return self.value + _UNIT_OFFSET

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Address({self.value})"