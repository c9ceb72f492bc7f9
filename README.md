# cmrinet

Building, inspecting and receiving frames that travel over a CMRInet bus,
as used by model-railway control nodes.

The package has no runtime dependencies.

## Installing

```
pip install cmrinet
```

## Modules

- `cmrinet.address`: `Address`, plus the serial speed constants `BAUDS`
  (9600, 19200, 28800, 57600, 115200) and `DEFAULT_BAUD` (19200).
- `cmrinet.frame`: `Frame`, plus the control bytes `SYN`, `STX`, `ETX`, `DLE`
  and the limits `MAX_FRAME_LEN` (518) and `MAX_PACKET_LEN` (258).
- `cmrinet.receiver`: `FrameReceiver` and `ReceiveState`.
- `cmrinet.errors`: the exceptions.

## Addresses

Nodes are numbered 0 to 127. On the wire the same address appears as a
"unit address" between 65 and 192. `Address` converts between the two and
raises on values out of range. Addresses are immutable, hashable and ordered.

```python
from cmrinet.address import Address

address = Address.from_node_address(5)
address.node_address   # 5
address.unit_address   # 70
int(address)           # 5

Address.from_unit_address(65).node_address  # 0
Address.from_node_address(128)             # raises InvalidNodeAddressError
Address.from_unit_address(200)             # raises InvalidUnitAddressError
```

## Building a frame to send

A frame is `SYN SYN STX <unit address> <message type> <data...> ETX`. Data bytes
that clash with the control bytes are escaped with `DLE`, which `push` does
for you and reports by returning the number of bytes it added.

```python
from cmrinet.address import Address
from cmrinet.frame import Frame

frame = Frame()
frame.begin(Address.from_node_address(0), "T")   # or ord("T")
frame.push(127)       # returns 1
frame.push(16)        # needs escaping, returns 2
frame.finish()
bytes(frame)          # b'\xff\xff\x02AT\x7f\x10\x10\x03'

# or all at once
frame = Frame.encode(Address.from_node_address(0), "T", [127, 16])
```

`begin` also accepts a plain node number in place of an `Address`. A frame
holds at most `Frame.MAX_LEN` (518) bytes; `available` tells how many more
fit, and `push` and `finish` raise `FullError` when there is no room left.

## Inspecting a frame

```python
frame = Frame.from_bytes(b"\xff\xff\x02CP\x03")
frame.address          # 2 (None if the address byte is not a valid unit address)
frame.message_type     # 'P' (one of 'I', 'P', 'R', 'T', otherwise None)
frame.packet_bytes()   # b'CP' - the unescaped packet inside the frame
f"{frame:x}"           # '[0xff, 0xff, 0x02, 0x43, 0x50, 0x03]'
f"{frame:X}"           # '[0xFF, 0xFF, 0x02, 0x43, 0x50, 0x03]'
len(frame), frame[3], list(frame)
frame == b"\xff\xff\x02CP\x03"   # True
```

`from_bytes` raises `FrameTooShortError` for fewer than 4 bytes and
`FrameTooLongError` for more than 518. `packet_bytes` raises
`FrameTooShortError`, `MissingSynchronisationError`, `MissingStartError` or
`MissingEndError` when the frame is malformed, and `InvalidPacketError` (with
the underlying `PacketTooShortError` or `PacketTooLongError` as its `source`)
when the packet inside is too short or longer than 258 bytes.

## Receiving frames byte by byte

`FrameReceiver` follows the bus one byte at a time, skipping noise until it
sees `SYN SYN STX`, and reports when an unescaped `ETX` completes a frame.

```python
from cmrinet.receiver import FrameReceiver

receiver = FrameReceiver()
for byte in b"\xff\xff\x02KT\x7f\x10\x10\x03":
    if receiver.receive(byte):
        frame = receiver.frame
        print(frame.packet_bytes())   # b'KT\x7f\x10'
        receiver.reset()
```

`state` gives the current `ReceiveState` and `len(receiver)` the number of
bytes held so far. `feed` takes a chunk of bytes and yields a copy of each
completed frame, resetting after each one:

```python
frames = list(FrameReceiver().feed(b"noise\xff\xff\x02AP\x03\xff\xff\x02BP\x03"))
```

`receive` raises `ReceiveTooShortError` if a completed frame is shorter than
6 bytes and `ReceiveTooLongError` if the data grows past the packet limit;
in both cases the receiver resets first, ready for the next frame. It raises
`AlreadyCompleteError` if called again after a frame completed but before
`reset`.

## Errors

Every error derives from `cmrinet.errors.CmriError`, grouped under
`PacketError`, `DecodeError`, `ReceiveError` and `FullError`. Errors compare
equal when they are of the same type with the same arguments.

## What the package does not do

It works at the level of frames and raw packet bytes only. It does not decode
packets into typed messages (initialization, poll request, receive data,
transmit data), does not model node configurations, and does not open serial
ports or network connections; reading and writing the bytes is left to the
caller.

## Running the tests

```
pip install -e .[test]
pytest
```