"""FakeTerminal: test double for blueprint.tui.terminal.Terminal.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

import io
from contextlib import contextmanager

from blueprint.tui.terminal import EOF, Terminal

UP = "\x1b[A"
DOWN = "\x1b[B"
RIGHT = "\x1b[C"
LEFT = "\x1b[D"
ENTER = "\r"


def key_codes(*sequences):
    """Flatten key sequences such as DOWN, ENTER into input codes."""
    return [ord(ch) for seq in sequences for ch in seq]


class TTYInput(io.StringIO):
    """Line input that reports itself as an interactive terminal."""

    def isatty(self):
        return True


class FakeTerminal(Terminal):
    """Terminal over in-memory streams with scripted key presses.

    Usage:
        term = FakeTerminal(keys=key_codes(DOWN, ENTER))
        term.read_unit()  # 27
        term.output       # everything written so far
    """

    def __init__(self, *, keys=(), lines="", tty=True, term="xterm-256color",
                 os_name="Linux", msys=False):
        environ = {"TERM": term}
        if msys:
            environ["MSYSTEM"] = "MINGW64"
        stdin = TTYInput(lines) if tty else io.StringIO(lines)
        super().__init__(stdin=stdin, stdout=io.StringIO(), environ=environ, os_name=os_name)
        self._keys = list(keys)
        self.raw_mode_entered = 0
        self.raw_mode_exited = 0

    def raw_mode_available(self):
        return True

    @contextmanager
    def raw_mode(self):
        self.raw_mode_entered += 1
        try:
            yield None
        finally:
            self.raw_mode_exited += 1

    def read_unit(self):
        if self._keys:
            return self._keys.pop(0)
        if self._input_closed:
            raise EOFError("terminal input closed")
        self._input_closed = True
        return EOF

    @property
    def output(self):
        return self.stdout.getvalue()
