"""Server: rebuilds bytes from incoming signals and writes them out."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO

from sigtalk.printf import printf
from sigtalk.protocol import SIGNAL_ONE, SIGNAL_ZERO, ByteAssembler

USAGE = "error\nTry to use: ./server\n"


class Server:
    """Decodes a signal stream into bytes written to ``output``."""

    def __init__(
        self,
        output: BinaryIO | None = None,
        acknowledge: bool = False,
        kill: Callable[[int, int], None] | None = None,
    ) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.acknowledge = acknowledge
        self._kill = kill if kill is not None else os.kill
        self._assembler = ByteAssembler()

    def handle(self, signum: int, sender_pid: int | None = None) -> int | None:
        """Take one signal; return the byte it completes, if any.

        Without acknowledgement, bytes above 127 are not written. With it,
        a NUL byte is answered with a signal to ``sender_pid``.
        """
        value = self._assembler.feed(signum)
        if value is None:
            return None
        if self.acknowledge:
            if value == 0 and sender_pid:
                self._kill(sender_pid, SIGNAL_ONE)
            self._write(value)
        elif value < 0x80:
            self._write(value)
        return value

    def _write(self, value: int) -> None:
        self.output.write(bytes([value]))
        self.output.flush()

    def serve(self) -> None:
        """Print the process id and decode signals until interrupted."""
        if not hasattr(signal, "sigwaitinfo"):
            raise OSError("signal delivery with sender information is unavailable")
        watched = {SIGNAL_ONE, SIGNAL_ZERO}
        printf("This is my pid: %d\n", os.getpid())
        signal.pthread_sigmask(signal.SIG_BLOCK, watched)
        try:
            while True:
                info = signal.sigwaitinfo(watched)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, watched)


def main(argv: list[str] | None = None) -> int:
    """Run the server: ``[--ack]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledge = args == ["--ack"]
    if args and not acknowledge:
        printf(USAGE)
        return 1
    try:
        Server(acknowledge=acknowledge).serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())