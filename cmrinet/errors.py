"""Exceptions raised while handling CMRInet addresses, packets and frames."""

from __future__ import annotations


class CmriError(Exception):
    """Base class for every error raised by this package.

    Two errors are equal when they are of the same type and carry the same
    arguments, so they can be compared like plain values.
    """

    default_message = "CMRInet error"

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self.default_message,)))

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class PacketError(CmriError):
    """A packet is invalid."""

    default_message = "Invalid packet"


class InvalidNodeAddressError(PacketError):
    """A node address was outside 0 to 127 (inclusive)."""

    def __init__(self, address: int) -> None:
        super().__init__(f"Invalid node address {address}")
        self.address = address


class InvalidUnitAddressError(PacketError):
    """A unit address was outside 65 to 192 (inclusive)."""

    def __init__(self, address: int) -> None:
        super().__init__(f"Invalid unit address {address}")
        self.address = address


class PacketTooShortError(PacketError):
    """A packet is too short."""

    default_message = "Packet is too short"


class PacketTooLongError(PacketError):
    """A packet is too long."""

    default_message = "Packet is too long"


class DecodeError(CmriError):
    """A frame could not be decoded."""

    default_message = "Frame could not be decoded"


class FrameTooShortError(DecodeError):
    """The frame is too short."""

    default_message = "Frame is too short"


class FrameTooLongError(DecodeError):
    """The raw frame is too long."""

    default_message = "Raw frame is too long"


class MissingSynchronisationError(DecodeError):
    """The frame is missing the synchronisation bytes."""

    default_message = "Frame is missing the synchronisation bytes"


class MissingStartError(DecodeError):
    """The frame is missing the start byte."""

    default_message = "Frame is missing the start byte"


class MissingEndError(DecodeError):
    """The frame is missing the end byte."""

    default_message = "Frame is missing the end byte"


class InvalidPacketError(DecodeError):
    """The frame was valid, but contained an invalid packet."""

    def __init__(self, source: PacketError) -> None:
        super().__init__("Invalid packet")
        self.source = source
        self.__cause__ = source

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.source == other.source

    def __hash__(self) -> int:
        return hash((type(self), self.source))


class ReceiveError(CmriError):
    """A byte could not be received into a frame."""

    default_message = "Frame could not be received"


class ReceiveTooShortError(ReceiveError):
    """The completed frame is too short."""

    default_message = "Frame is too short"


class ReceiveTooLongError(ReceiveError):
    """The frame being received is too long."""

    default_message = "Frame is too long"


class AlreadyCompleteError(ReceiveError):
    """The frame is already complete."""

    default_message = "Frame is already complete"


class FullError(CmriError):
    """The frame is already full."""

    default_message = "Full"