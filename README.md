# sigtalk

sigtalk sends text from one process to another using only two POSIX signals.
Each byte travels as eight signals, least significant bit first. SIGUSR1
carries a 1 bit and SIGUSR2 carries a 0 bit. The server rebuilds the bytes
and writes each one to standard output as soon as it is complete.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id, then waits for signals until you
interrupt it:

```
$ sigtalk-server
This is my pid: 4242
```

In another terminal, send it a message:

```
$ sigtalk-client 4242 "hello there"
```

The server writes `hello there` and then a newline. In this plain mode the
client leaves out every byte above 127. The server drops such bytes as well,
so only ASCII text comes through.

The client takes exactly two arguments, a process id and a message. The
server takes none. With any other arguments, each command prints a short
usage error and exits with status 1. The process id is read the way `atoi`
reads it: leading whitespace and a sign are allowed, and parsing stops at the
first non-digit.

## Acknowledged mode

Pass `--ack` to both commands:

```
$ sigtalk-server --ack
$ sigtalk-client --ack 4242 "héllo"
```

In this mode every byte is sent, so UTF-8 text passes through unchanged. The
message ends with a NUL byte followed by a newline. When the server receives
the NUL byte, it writes it out and sends SIGUSR1 back to the sender. The
client then prints `The message was received by the server`.

From Python, `sigtalk.client.send_message(pid, message, delay, acknowledge,
kill)` and `sigtalk.server.Server(output, acknowledge, kill)` offer the same
choice. `send_message` returns the number of signals it sent. It waits 250 µs
after each signal in plain mode and 300 µs in acknowledged mode, unless you
give a `delay`. Both take a `kill` callable in place of `os.kill`. This lets
you drive them without real processes: `Server.handle(signum, sender_pid)`
takes one signal and returns the byte that signal completes, if any.

## Library use

- `sigtalk.protocol` has `byte_to_signals` and `message_signals`, which turn
  bytes into signal numbers (`SIGNAL_ONE`, `SIGNAL_ZERO`). It also has
  `ByteAssembler`, which rebuilds bytes from signals (`feed`, `reset`,
  `pending`).
- `sigtalk.printf` provides `format_printf` and `printf`, which handle the
  conversions `%c %s %p %d %i %u %x %X %%`. `printf` returns the number of
  characters it wrote.
- `sigtalk.textutils` holds string helpers with C-library behaviour: `atoi`,
  `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `memcmp`,
  `strchr` and `strrchr`.
- `sigtalk.chars` holds ASCII character tests and case conversion on integer
  codes: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper` and `to_lower`.

```python
from sigtalk.protocol import ByteAssembler, message_signals

assembler = ByteAssembler()
received = bytes(b for s in message_signals("hi", b"")
                 if (b := assembler.feed(s)) is not None)
assert received == b"hi"
```

## Limitations

- `Server.serve` waits with `signal.sigwaitinfo`. Platforms without it, such
  as macOS and Windows, raise `OSError` there. The encoding and decoding
  classes still work on those platforms.
- The server keeps a single byte in progress for everyone. Two clients
  sending at once interleave their bits and corrupt each other's text.
- Nothing confirms delivery bit by bit. The client only spaces its signals
  out with a fixed delay, and signals can still be lost under load.