"""Frames as they appear on a CMRInet network."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import overload

from .address import Address
from .errors import (
    FrameTooLongError,
    FrameTooShortError,
    FullError,
    InvalidPacketError,
    InvalidUnitAddressError,
    MissingEndError,
    MissingStartError,
    MissingSynchronisationError,
    PacketTooLongError,
    PacketTooShortError,
)

#: Synchronisation byte.
SYN = 0xFF
#: Start-of-text byte.
STX = 0x02
#: End-of-text byte.
ETX = 0x03
#: Data-link-escape byte.
DLE = 0x10

#: Bytes which must be escaped inside a frame.
ESCAPED_BYTES = frozenset((SYN, STX, DLE, ETX))
#: Message types understood on the network.
MESSAGE_TYPES = frozenset("IPRT")

#: Largest number of bytes a frame can hold.
MAX_FRAME_LEN = 518
#: Largest number of bytes an (unescaped) packet can hold.
MAX_PACKET_LEN = 258


def _as_byte(value: int) -> int:
    value = operator.index(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte must be in range 0 to 255, got {value}")
    return value


def _message_type_byte(message_type: int | str) -> int:
    if isinstance(message_type, str):
        if len(message_type) != 1:
            raise ValueError("message type must be a single character")
        return _as_byte(ord(message_type))
    return _as_byte(message_type)


class Frame:
    """Holds a packet as it appears on the CMRInet network.

    A frame is ``SYN SYN STX <escaped packet> ETX``; it can be built byte by
    byte with :meth:`begin`, :meth:`push` and :meth:`finish`, or taken from
    bytes received with :meth:`from_bytes`.
    """

    MAX_LEN = MAX_FRAME_LEN

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._data = bytearray()

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> Frame:
        """Create a frame holding exactly ``data``.

        Raises :class:`FrameTooShortError` for fewer than 4 bytes and
        :class:`FrameTooLongError` for more than :attr:`MAX_LEN`.
        """
        raw = bytes(data)
        if len(raw) < 4:
            raise FrameTooShortError()
        if len(raw) > cls.MAX_LEN:
            raise FrameTooLongError()
        frame = cls()
        frame._data[:] = raw
        return frame

    @classmethod
    def encode(
        cls, address: Address | int, message_type: int | str, data: Iterable[int]
    ) -> Frame:
        """Build a complete frame for ``address`` carrying ``data``."""
        frame = cls()
        frame.begin(address, message_type)
        for value in data:
            frame.push(value)
        frame.finish()
        return frame

    @property
    def address(self) -> int | None:
        """The node address the contained packet is for, if it is valid."""
        if len(self._data) < 4:
            return None
        try:
            return Address.from_unit_address(self._data[3]).node_address
        except InvalidUnitAddressError:
            return None

    @property
    def message_type(self) -> str | None:
        """The message type of the contained packet, if it is valid."""
        if len(self._data) < 5:
            return None
        kind = chr(self._data[4])
        return kind if kind in MESSAGE_TYPES else None

    @property
    def available(self) -> int:
        """How many more bytes the frame can hold."""
        return self.MAX_LEN - len(self._data)

    def begin(self, address: Address | int, message_type: int | str) -> None:
        """Start the frame afresh with the preamble, address and message type."""
        if not isinstance(address, Address):
            address = Address(address)
        kind = _message_type_byte(message_type)
        self._data[:] = bytes((SYN, SYN, STX, address.unit_address, kind))

    def push(self, value: int) -> int:
        """Append a data byte, escaping it if needed.

        Returns the number of bytes added; raises :class:`FullError` if
        there is no room.
        """
        value = _as_byte(value)
        escape = value in ESCAPED_BYTES
        count = 2 if escape else 1
        if self.available < count:
            raise FullError()
        if escape:
            self._data.append(DLE)
        self._data.append(value)
        return count

    def finish(self) -> None:
        """Append the end byte; raises :class:`FullError` if there is no room."""
        if self.available < 1:
            raise FullError()
        self._data.append(ETX)

    def packet_bytes(self) -> bytes:
        """Return the unescaped packet (address, message type and data).

        Raises a :class:`DecodeError` subclass if the frame is malformed.
        """
        data = self._data
        if len(data) < 4:
            raise FrameTooShortError()
        if data[0:2] != bytes((SYN, SYN)):
            raise MissingSynchronisationError()
        if data[2] != STX:
            raise MissingStartError()
        if data[-1] != ETX:
            raise MissingEndError()
        if len(data) < 6:
            raise InvalidPacketError(PacketTooShortError())

        packet = bytearray()
        escape = False
        for byte in data[3:-1]:
            if byte == DLE and not escape:
                escape = True
                continue
            escape = False
            if len(packet) >= MAX_PACKET_LEN:
                raise InvalidPacketError(PacketTooLongError())
            packet.append(byte)
        return bytes(packet)

    def _append_raw(self, byte: int) -> None:
        """Append a byte exactly as received, without escaping."""
        if self.available < 1:
            raise FullError()
        self._data.append(_as_byte(byte))

    def _clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> bytes: ...

    def __getitem__(self, index: int | slice) -> int | bytes:
        if isinstance(index, slice):
            return bytes(self._data[index])
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self._data))

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Frame):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self._data) == bytes(other)
        return NotImplemented

    def __format__(self, spec: str) -> str:
        if spec == "":
            return str(self)
        if spec == "x":
            parts = (f"{value:#04x}" for value in self._data)
        elif spec == "X":
            parts = (f"0x{value:02X}" for value in self._data)
        else:
            raise ValueError(f"unsupported format specifier {spec!r} for Frame")
        return "[" + ", ".join(parts) + "]"

    def __repr__(self) -> str:
        return f"Frame({bytes(self._data)!r})"