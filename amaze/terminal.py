"""Terminal plumbing: single-key input and frame output.

Keys are read without waiting for ENTER. On POSIX the terminal is switched
to cbreak mode (no line buffering, no echo, Ctrl+C still interrupts) for the
duration of one read; Windows uses msvcrt.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

from colorama import Cursor
from colorama.ansi import clear_screen

if os.name == "nt":  # pragma: no cover - platform dependent
    import msvcrt

    def read_key() -> str:
        ch = msvcrt.getwch()
        if ch == "\x1a":
            raise EOFError("input closed")
        return ch

else:
    import termios
    import tty

    def read_key() -> str:
        stream = sys.stdin
        if not stream.isatty():
            ch = stream.read(1)
        else:
            fd = stream.fileno()
            old_settings = termios.tcgetattr(fd)
            try:
                tty.setcbreak(fd)
                ch = stream.read(1)
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        if ch == "":
            raise EOFError("input closed")
        return ch


class FrameWriter:
    """Writes whole frames to a stream, optionally repainting from the top-left."""

    def __init__(self, stream: TextIO | None = None, clear: bool = False):
        self.stream = stream or sys.stdout
        self.clear = clear

    def __call__(self, frame: str) -> None:
        if self.clear:
            self.stream.write(clear_screen() + Cursor.POS(1, 1))
        self.stream.write(frame + "\n")
        self.stream.flush()
