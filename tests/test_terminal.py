import io
import os

import pytest

from amaze import terminal

posix_only = pytest.mark.skipif(os.name == "nt", reason="reads through termios on POSIX")


@posix_only
def test_read_key_from_pipe(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("lj"))
    assert terminal.read_key() == "l"
    assert terminal.read_key() == "j"


@posix_only
def test_read_key_eof_raises(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(EOFError):
        terminal.read_key()


def test_frame_writer_plain():
    buf = io.StringIO()
    terminal.FrameWriter(buf)("###\n#@#\n###")
    assert buf.getvalue() == "###\n#@#\n###\n"


def test_frame_writer_repaints_from_top_left():
    buf = io.StringIO()
    terminal.FrameWriter(buf, clear=True)("#")
    out = buf.getvalue()
    assert out.startswith("\x1b[2J")
    assert "\x1b[1;1H" in out
    assert out.endswith("#\n")
