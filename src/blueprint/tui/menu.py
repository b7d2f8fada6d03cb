"""Inline selection menu.

On terminals where ANSI cursor control is safe (Linux/macOS terminals,
Git Bash) the menu is driven by the arrow keys and redrawn in place. On
plain Windows consoles and redirected input it falls back to a numbered
menu read line by line.
"""

from enum import Enum

from blueprint.errors import InvalidMenuOptionsError
from blueprint.tui.keys import KeyEvent, read_key_event
from blueprint.tui.terminal import ESC, Terminal, green_bold


# --- Options -----------------------------------------------------------------


def valid_option(option) -> bool:
    """True for a (Enum key, str label) pair."""
    return (
        isinstance(option, (tuple, list))
        and len(option) == 2
        and isinstance(option[0], Enum)
        and isinstance(option[1], str)
    )


def validate_options(options):
    """Return options unchanged, or raise InvalidMenuOptionsError."""
    if (
        not isinstance(options, (tuple, list))
        or not options
        or not all(valid_option(option) for option in options)
    ):
        raise InvalidMenuOptionsError(options)
    return options


def option_label(options, key):
    """Return the label of the first option with the given key, or None."""
    for option_key, label in options:
        if option_key == key:
            return label
    return None


# --- Selection state machine ---------------------------------------------------


def run_menu_loop(options, read_unit, on_index_changed):
    """Track the selected index until Enter and return the selected key.

    Args:
        options: Sequence of (key, label) pairs.
        read_unit: Blocking callable yielding one input code per call.
        on_index_changed: Called with the new index, only when a key press
            actually moves the selection.
    """
    last_index = len(options) - 1
    selected_index = 0
    while True:
        event = read_key_event(read_unit)
        if event is KeyEvent.ENTER:
            return options[selected_index][0]

        if event is KeyEvent.UP:
            new_index = max(0, selected_index - 1)
        elif event is KeyEvent.DOWN:
            new_index = min(last_index, selected_index + 1)
        else:
            continue

        if new_index != selected_index:
            on_index_changed(new_index)
        selected_index = new_index


# --- Arrow-key menu ------------------------------------------------------------


class ArrowMenu:
    """Arrow-key menu drawn below the prompt with ANSI cursor control.

    Lines are counted from the saved cursor position (line 1, the prompt
    line): options start on line 2, followed by one parked blank line.
    """

    def __init__(self, terminal: Terminal):
        self._terminal = terminal
        self._pointer = ">" if terminal.is_windows() else "▶"

    def select(self, options):
        line_count = len(options) + 1
        terminal = self._terminal
        with terminal.raw_mode():
            try:
                terminal.hide_cursor()
                self._reserve_lines(line_count)
                terminal.save_cursor()
                self._render_options(options, 0)
                self._goto_line(line_count + 1)
                terminal.clear_line()

                return run_menu_loop(
                    options,
                    terminal.read_unit,
                    lambda index: self._render_options(options, index),
                )
            finally:
                self._delete_lines(line_count)
                terminal.show_cursor()

    def _reserve_lines(self, line_count):
        """Scroll now so the saved cursor stays valid while the block is drawn."""
        self._terminal.write("\n" * line_count, ESC, line_count, "A")

    def _goto_line(self, n):
        """Move to line n (1-based) relative to the saved cursor."""
        self._terminal.restore_cursor()
        if n > 1:
            self._terminal.write(ESC, n - 1, "E")

    def _render_options(self, options, selected_index):
        self._goto_line(2)
        for i, (_, label) in enumerate(options):
            self._print_option(label, i == selected_index)

    def _print_option(self, label, selected):
        self._terminal.clear_line()
        if selected:
            self._terminal.write(f"{self._pointer} {green_bold(label)}\n")
        else:
            self._terminal.write(f"{label}\n")

    def _delete_lines(self, line_count):
        self._goto_line(2)
        self._terminal.write(ESC, line_count, "M")


# --- Fallback numeric menu -----------------------------------------------------


def _parse_choice(raw_input, option_count):
    """Return the 0-based index for a 1-based numeric choice, or None."""
    try:
        index = int(raw_input.strip()) - 1
    except ValueError:
        return None
    if 0 <= index < option_count:
        return index
    return None


class FallbackMenu:
    """Numbered menu for terminals where raw keys are not reliable."""

    def __init__(self, terminal: Terminal):
        self._terminal = terminal

    def select(self, options):
        terminal = self._terminal
        while True:
            terminal.write("\n")
            for i, (_, label) in enumerate(options):
                terminal.write(f"  [{i + 1}] {label}\n")
            raw_input = terminal.read_line(f"Enter choice [1-{len(options)}]: ")
            index = _parse_choice(raw_input, len(options))
            if index is not None:
                return options[index][0]
            terminal.write("Invalid choice, try again.\n")


# --- Public API ----------------------------------------------------------------


def choose_menu(terminal: Terminal):
    """Return the menu implementation this terminal supports."""
    if terminal.arrow_menu_supported():
        return ArrowMenu(terminal)
    return FallbackMenu(terminal)


def create_menu(options, *, terminal=None):
    """Show an inline menu and return the key of the chosen option.

    Args:
        options: Non-empty list of (Enum key, str label) pairs.
        terminal: Terminal handle; defaults to the process terminal.

    Raises:
        InvalidMenuOptionsError: Before any terminal interaction, when
            options are malformed.
    """
    validate_options(options)
    if terminal is None:
        terminal = Terminal()
    return choose_menu(terminal).select(options)
