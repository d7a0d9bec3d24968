"""Bit-level wire protocol: one signal per bit, least significant bit first."""

from __future__ import annotations

import signal
from collections.abc import Iterator

SIGNAL_ONE: int = int(getattr(signal, "SIGUSR1", 10))
SIGNAL_ZERO: int = int(getattr(signal, "SIGUSR2", 12))
BITS_PER_BYTE = 8


def byte_to_signals(value: int) -> list[int]:
    """Return the eight signals that carry ``value``, lowest bit first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    return [
        SIGNAL_ONE if value & (1 << bit) else SIGNAL_ZERO
        for bit in range(BITS_PER_BYTE)
    ]


def message_signals(message: str | bytes, terminate: bytes = b"\n") -> Iterator[int]:
    """Yield the signals for every byte of ``message`` followed by ``terminate``."""
    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for value in payload + bytes(terminate):
        yield from byte_to_signals(value)


class ByteAssembler:
    """Rebuilds bytes from a stream of signals, eight signals per byte."""

    def __init__(self) -> None:
        self._value = 0
        self._bit = 0

    @property
    def pending(self) -> int:
        """Number of bits received for the byte in progress."""
        return self._bit

    def feed(self, signum: int) -> int | None:
        """Record one signal; return the finished byte after the eighth."""
        if signum == SIGNAL_ONE:
            self._value |= 1 << self._bit
        self._bit += 1
        if self._bit < BITS_PER_BYTE:
            return None
        value = self._value
        self.reset()
        return value

    def reset(self) -> None:
        """Discard any partially received byte."""
        self._value = 0
        self._bit = 0