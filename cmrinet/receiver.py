"""Assembling frames from bytes received on a CMRInet network."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator

from .errors import (
    AlreadyCompleteError,
    FullError,
    ReceiveTooLongError,
    ReceiveTooShortError,
)
from .frame import DLE, ETX, MAX_PACKET_LEN, STX, SYN, Frame

_log = logging.getLogger(__name__)

_MIN_COMPLETE_LEN = 6


class ReceiveState(enum.Enum):
    """Where the receiver is in the structure of a frame."""

    WAITING_FOR_SYN = enum.auto()
    WAITING_FOR_SYN_SYN = enum.auto()
    WAITING_FOR_SYN_SYN_STX = enum.auto()
    RECEIVING = enum.auto()
    RECEIVING_ESCAPED = enum.auto()
    RECEIVED = enum.auto()


class FrameReceiver:
    """Builds a :class:`Frame` one received byte at a time.

    Bytes before the ``SYN SYN STX`` preamble are discarded; the frame is
    complete once an unescaped ``ETX`` byte arrives.
    """

    def __init__(self) -> None:
        self._frame = Frame()
        self._state = ReceiveState.WAITING_FOR_SYN
        self._packet_len = 0

    @property
    def state(self) -> ReceiveState:
        """The current receive state."""
        return self._state

    @property
    def frame(self) -> Frame:
        """The frame received so far."""
        return self._frame

    def __len__(self) -> int:
        return len(self._frame)

    def reset(self) -> None:
        """Discard what has been received, ready to receive a new frame."""
        self._frame._clear()
        self._state = ReceiveState.WAITING_FOR_SYN
        self._packet_len = 0

    def _accept(self, byte: int, state: ReceiveState) -> None:
        try:
            self._frame._append_raw(byte)
        except FullError:
            self.reset()
            raise ReceiveTooLongError() from None
        self._state = state

    def receive(self, byte: int) -> bool:
        """Take one byte from the network; return whether the frame is complete.

        Raises :class:`AlreadyCompleteError` if the frame was already
        complete, :class:`ReceiveTooShortError` if the completed frame is too
        short and :class:`ReceiveTooLongError` if it grows too long; in the
        last two cases the receiver is reset first.
        """
        state = self._state

        if state is ReceiveState.RECEIVED:
            raise AlreadyCompleteError()

        if state is ReceiveState.WAITING_FOR_SYN:
            if byte == SYN:
                self._accept(byte, ReceiveState.WAITING_FOR_SYN_SYN)
        elif state is ReceiveState.WAITING_FOR_SYN_SYN:
            if byte == SYN:
                self._accept(byte, ReceiveState.WAITING_FOR_SYN_SYN_STX)
            else:
                self.reset()
        elif state is ReceiveState.WAITING_FOR_SYN_SYN_STX:
            if byte == STX:
                self._accept(byte, ReceiveState.RECEIVING)
            elif byte != SYN:
                # Further SYN bytes still leave two consecutive SYNs seen.
                self.reset()
        elif state is ReceiveState.RECEIVING:
            if byte == ETX:
                self._accept(byte, ReceiveState.RECEIVED)
                _log.debug("Completed frame %r", self._frame)
                if len(self._frame) < _MIN_COMPLETE_LEN:
                    self.reset()
                    raise ReceiveTooShortError()
                return True
            if byte == DLE:
                self._accept(byte, ReceiveState.RECEIVING_ESCAPED)
            else:
                if self._packet_len >= MAX_PACKET_LEN:
                    self.reset()
                    raise ReceiveTooLongError()
                self._packet_len += 1
                self._accept(byte, ReceiveState.RECEIVING)
        else:  # RECEIVING_ESCAPED
            self._accept(byte, ReceiveState.RECEIVING)
        return False

    def feed(self, data: Iterable[int]) -> Iterator[Frame]:
        """Receive every byte of ``data``, yielding each completed frame.

        After a frame is yielded the receiver is reset so that following
        bytes start a new frame. Errors from :meth:`receive` propagate.
        """
        for byte in data:
            if self.receive(byte):
                completed = Frame.from_bytes(bytes(self._frame))
                self.reset()
                yield completed