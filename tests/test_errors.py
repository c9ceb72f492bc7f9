import pytest

from cmrinet.errors import (
    AlreadyCompleteError,
    CmriError,
    DecodeError,
    FrameTooLongError,
    FrameTooShortError,
    FullError,
    InvalidNodeAddressError,
    InvalidPacketError,
    InvalidUnitAddressError,
    MissingEndError,
    MissingStartError,
    MissingSynchronisationError,
    PacketError,
    PacketTooLongError,
    PacketTooShortError,
    ReceiveError,
    ReceiveTooLongError,
    ReceiveTooShortError,
)


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (FrameTooShortError(), "Frame is too short"),
        (MissingSynchronisationError(), "Frame is missing the synchronisation bytes"),
        (MissingStartError(), "Frame is missing the start byte"),
        (MissingEndError(), "Frame is missing the end byte"),
        (FrameTooLongError(), "Raw frame is too long"),
        (InvalidPacketError(PacketTooShortError()), "Invalid packet"),
        (ReceiveTooShortError(), "Frame is too short"),
        (ReceiveTooLongError(), "Frame is too long"),
        (AlreadyCompleteError(), "Frame is already complete"),
        (FullError(), "Full"),
    ],
)
def test_messages(error, message):
    assert str(error) == message


@pytest.mark.parametrize(
    ("error", "base"),
    [
        (FrameTooShortError(), DecodeError),
        (FrameTooLongError(), DecodeError),
        (MissingSynchronisationError(), DecodeError),
        (MissingStartError(), DecodeError),
        (MissingEndError(), DecodeError),
        (InvalidPacketError(PacketTooShortError()), DecodeError),
        (ReceiveTooShortError(), ReceiveError),
        (ReceiveTooLongError(), ReceiveError),
        (AlreadyCompleteError(), ReceiveError),
        (PacketTooShortError(), PacketError),
        (PacketTooLongError(), PacketError),
        (InvalidNodeAddressError(128), PacketError),
        (InvalidUnitAddressError(193), PacketError),
        (FullError(), CmriError),
        (FrameTooShortError(), CmriError),
        (AlreadyCompleteError(), CmriError),
        (PacketTooLongError(), CmriError),
    ],
)
def test_hierarchy(error, base):
    with pytest.raises(base) as info:
        raise error
    assert info.value == error
    assert info.type is type(error)


def test_equality_same_type():
    assert [FullError(), MissingEndError()].count(FullError()) == 1
    assert [FullError(), MissingEndError()].count(MissingEndError()) == 1
    assert FullError() == FullError()
    assert MissingEndError() == MissingEndError()


def test_inequality_different_type():
    assert FrameTooShortError() != ReceiveTooShortError()
    assert PacketTooShortError() != PacketTooLongError()


def test_hash_matches_equality():
    assert hash(FullError()) == hash(FullError())
    assert len({FullError(), FullError(), MissingStartError()}) == 2


def test_invalid_node_address_keeps_address():
    error = InvalidNodeAddressError(128)
    assert error.address == 128
    assert "128" in str(error)
    assert error == InvalidNodeAddressError(128)
    assert error != InvalidNodeAddressError(255)


def test_invalid_unit_address_keeps_address():
    error = InvalidUnitAddressError(193)
    assert error.address == 193
    assert "193" in str(error)
    assert error == InvalidUnitAddressError(193)
    assert error != InvalidUnitAddressError(64)


def test_invalid_packet_wraps_source():
    source = PacketTooShortError()
    error = InvalidPacketError(source)
    assert error.source is source
    assert error.__cause__ is source


def test_invalid_packet_equality_follows_source():
    assert InvalidPacketError(PacketTooShortError()) == InvalidPacketError(PacketTooShortError())
    assert InvalidPacketError(PacketTooShortError()) != InvalidPacketError(PacketTooLongError())


def test_can_be_caught_as_base():
    with pytest.raises(DecodeError) as info:
        raise MissingSynchronisationError()
    assert info.value == MissingSynchronisationError()