"""Client: sends a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable

from sigtalk.printf import printf
from sigtalk.protocol import SIGNAL_ONE, byte_to_signals
from sigtalk.textutils import atoi

PLAIN_DELAY = 250e-6
ACK_DELAY = 300e-6
USAGE = "Error!\nYou need a process ID and a message as inputs\n"
ACK_NOTICE = "The message was received by the server"


def send_message(
    pid: int,
    message: str | bytes,
    delay: float | None = None,
    acknowledge: bool = False,
    kill: Callable[[int, int], None] | None = None,
) -> int:
    """Send ``message`` to ``pid`` and return the number of signals sent.

    Without acknowledgement, bytes above 127 are skipped and a newline
    ends the message. With it, every byte is sent, followed by a NUL
    (which the server acknowledges) and a newline.
    """
    send = kill if kill is not None else os.kill
    if delay is None:
        delay = ACK_DELAY if acknowledge else PLAIN_DELAY
    payload = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if acknowledge:
        payload += b"\0\n"
    else:
        payload = bytes(value for value in payload if value < 0x80) + b"\n"
    sent = 0
    for value in payload:
        for signum in byte_to_signals(value):
            send(pid, signum)
            sent += 1
            if delay:
                time.sleep(delay)
    return sent


def _on_acknowledge(signum: int, _frame: object) -> None:
    if signum == SIGNAL_ONE:
        printf(ACK_NOTICE)


def main(argv: list[str] | None = None) -> int:
    """Run the client: ``[--ack] PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    acknowledge = "--ack" in args
    args = [arg for arg in args if arg != "--ack"]
    if len(args) != 2:
        printf(USAGE)
        return 1
    pid = atoi(args[0])
    if acknowledge and hasattr(signal, "SIGUSR1"):
        signal.signal(signal.SIGUSR1, _on_acknowledge)
        signal.signal(signal.SIGUSR2, _on_acknowledge)
    try:
        send_message(pid, args[1], acknowledge=acknowledge)
    except OSError as error:
        printf("Error!\n%s\n", str(error))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())