#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import copy
import errno
import os
import sys
import termios
from typing import Optional

from .color import RESET

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"

ESC = "\x1b"
QUIT_KEYS = ('q', 'Q', ESC)

# "No data yet" on a non-blocking read; not an error
_NO_DATA = (errno.EAGAIN, errno.EWOULDBLOCK)


class TerminalError(Exception):
    """A terminal operation failed in a way the loop cannot recover from."""

    def __init__(self, operation, cause):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


def is_quit_key(key) -> bool:
    return key in QUIT_KEYS


class Terminal:
    """
    Raw-mode terminal session.

    Use as a context manager: entering switches stdin to non-canonical,
    no-echo, non-blocking reads and hides the cursor; leaving always puts
    the saved settings back.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.fd = self.stdin.fileno()
        self.saved = None

    def __enter__(self):
        self.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def enable_raw_mode(self):
        try:
            self.saved = termios.tcgetattr(self.fd)
        except (termios.error, OSError) as e:
            raise TerminalError("tcgetattr", e) from e

        raw = copy.deepcopy(self.saved)
        raw[0] &= ~termios.IXON                                       # iflag
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)     # lflag
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 0
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        except (termios.error, OSError) as e:
            self.saved = None
            raise TerminalError("tcsetattr", e) from e

        try:
            self.write_frame(HIDE_CURSOR + CLEAR_SCREEN)
        except Exception:
            self.restore()
            raise

    def restore(self):
        """Put back the original settings and show the cursor."""
        if self.saved is not None:
            try:
                termios.tcsetattr(self.fd, termios.TCSAFLUSH, self.saved)
            finally:
                self.saved = None
                self.write_frame(RESET + SHOW_CURSOR)

    def poll_key(self) -> Optional[str]:
        """Return one pending keystroke, or None right away if there is none."""
        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            if e.errno in _NO_DATA:
                return None
            raise TerminalError("read stdin", e) from e
        if not data:
            return None
        return data.decode('latin-1')

    def write_frame(self, frame: str):
        self.stdout.write(frame)
        self.stdout.flush()
