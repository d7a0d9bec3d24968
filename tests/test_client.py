from unittest import mock

import pytest

from sigtalk.client import USAGE, main, send_message
from sigtalk.protocol import ByteAssembler, SIGNAL_ONE, SIGNAL_ZERO


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, signum):
        self.calls.append((pid, signum))


def _decode(calls):
    assembler = ByteAssembler()
    out = bytearray()
    for _pid, signum in calls:
        value = assembler.feed(signum)
        if value is not None:
            out.append(value)
    return bytes(out)


def test_plain_message_round_trip():
    recorder = Recorder()
    sent = send_message(42, "hello", delay=0, kill=recorder)
    assert sent == len(recorder.calls)
    assert _decode(recorder.calls) == b"hello\n"
    assert {pid for pid, _ in recorder.calls} == {42}


def test_plain_skips_non_ascii_bytes():
    recorder = Recorder()
    send_message(1, "aé", delay=0, kill=recorder)
    assert _decode(recorder.calls) == b"a\n"


def test_acknowledged_message_ends_with_nul_and_newline():
    recorder = Recorder()
    send_message(7, "hi", delay=0, acknowledge=True, kill=recorder)
    assert _decode(recorder.calls) == b"hi\0\n"


def test_acknowledged_keeps_all_bytes():
    recorder = Recorder()
    send_message(7, "é", delay=0, acknowledge=True, kill=recorder)
    assert _decode(recorder.calls) == "é".encode("utf-8") + b"\0\n"


def test_only_protocol_signals_used():
    recorder = Recorder()
    send_message(3, b"\xff\x00", delay=0, acknowledge=True, kill=recorder)
    assert {signum for _, signum in recorder.calls} <= {SIGNAL_ONE, SIGNAL_ZERO}
    assert len(recorder.calls) % 8 == 0


@pytest.mark.parametrize("argv", [[], ["123"], ["1", "2", "3"]])
def test_main_rejects_wrong_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == USAGE


def test_main_sends_to_parsed_pid():
    recorder = Recorder()
    with mock.patch("os.kill", recorder), mock.patch("time.sleep"):
        assert main(["  +77x", "ok"]) == 0
    assert {pid for pid, _ in recorder.calls} == {77}
    assert _decode(recorder.calls) == b"ok\n"


def test_main_reports_missing_process(capsys):
    with mock.patch("os.kill", side_effect=ProcessLookupError("no such process")):
        assert main(["5", "x"]) == 1
    assert "no such process" in capsys.readouterr().out