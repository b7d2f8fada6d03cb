"""Terminal handle: capability detection, raw mode and ANSI helpers.

A Terminal bundles the streams, environment and OS name that the menu and
the prompts need, so tests can construct one over StringIO objects instead
of touching the process terminal.
"""

import importlib.util
import os
import platform
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Mapping, TextIO

ESC = "\x1b["

DUMB_TERMINAL_TYPES = frozenset({"dumb", "dumb-color"})

MSYS_ENV_VAR = "MSYSTEM"

EOF = -1
"""Sentinel returned by Terminal.read_unit when the input stream is closed."""


def green_bold(s):
    """Wrap s in bold green SGR codes."""
    return f"{ESC}1;32m{s}{ESC}0m"


@dataclass
class Terminal:
    """I/O handle for the process terminal."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    os_name: str = field(default_factory=platform.system)
    _input_closed: bool = field(default=False, init=False, repr=False)

    # --- Environment / capability detection ---

    def is_windows(self) -> bool:
        return self.os_name.lower().startswith("win")

    def is_msys(self) -> bool:
        """True under an MSYS / Git Bash layer on Windows."""
        return self.environ.get(MSYS_ENV_VAR) is not None

    def terminal_type(self) -> str:
        """Return the terminal's reported type; redirected input counts as dumb."""
        if not self.stdin.isatty():
            return "dumb"
        return self.environ.get("TERM") or "dumb"

    def is_dumb(self) -> bool:
        return self.terminal_type() in DUMB_TERMINAL_TYPES

    def ansi_capable(self) -> bool:
        """Return True if ANSI escape sequences are safe to use.

        - Dumb terminals (redirected IO, CI): never.
        - Non-Windows: always.
        - Windows: only under MSYS / Git Bash.
        """
        return not self.is_dumb() and (not self.is_windows() or self.is_msys())

    def raw_mode_available(self) -> bool:
        """True when this Python build can switch the terminal into raw mode."""
        return importlib.util.find_spec("termios") is not None

    def arrow_menu_supported(self) -> bool:
        """Return True if the arrow-key menu can be used.

        Needs the cursor control that ansi_capable() promises plus raw key
        input. Native Windows Python under Git Bash has no termios.
        """
        return self.ansi_capable() and self.raw_mode_available()

    # --- Raw input ---

    @contextmanager
    def raw_mode(self):
        """Put stdin into raw mode for the duration of the block.

        Only the mode is borrowed: stdin is never closed. The previous
        attributes are restored on every exit path; a failing restore
        propagates.
        """
        import termios

        fd = self.stdin.fileno()
        previous = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[0] &= ~(termios.IXON | termios.ICRNL | termios.INLCR)
        raw[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSANOW, raw)
        try:
            yield previous
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, previous)

    def read_unit(self) -> int:
        """Read one byte from stdin, returning its code or EOF.

        Reading again after EOF was returned raises EOFError.
        """
        if self._input_closed:
            raise EOFError("terminal input closed")
        data = os.read(self.stdin.fileno(), 1)
        if not data:
            self._input_closed = True
            return EOF
        return data[0]

    def read_line(self, prompt="") -> str:
        """Write prompt and read one line of ordinary (cooked) input."""
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("terminal input closed")
        return line.rstrip("\r\n")

    # --- Output ---

    def write(self, *parts):
        self.stdout.write("".join(str(p) for p in parts))
        self.stdout.flush()

    def print_ansi(self, *parts):
        """Write parts only when the terminal is ANSI capable."""
        if self.ansi_capable():
            self.write(*parts)

    def save_cursor(self):
        self.print_ansi(ESC, "s")

    def restore_cursor(self):
        self.print_ansi(ESC, "u")

    def clear_line(self):
        self.print_ansi(ESC, "2K")

    def hide_cursor(self):
        self.print_ansi(ESC, "?25l")

    def show_cursor(self):
        self.print_ansi(ESC, "?25h")

    def style_answer(self, s) -> str:
        """Bold green on ANSI-capable terminals, unchanged elsewhere."""
        if self.ansi_capable():
            return green_bold(s)
        return s

    def rewrite_prev_line(self, s):
        """Replace the previous line with s; a no-op without ANSI support."""
        self.print_ansi(ESC, "1A", "\r", ESC, "2K", s, "\n")
