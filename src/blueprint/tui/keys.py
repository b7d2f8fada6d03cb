"""Decode raw terminal input codes into menu key events."""

from enum import Enum

from blueprint.tui.terminal import EOF

ENTER_CODES = frozenset({13, 10})  # CR, LF
ESCAPE_CODE = 27

CSI_CODE = ord("[")  # ESC [ ...
SS3_CODE = ord("O")  # ESC O ... (application keypad mode)

UP_FINAL = ord("A")
DOWN_FINAL = ord("B")
RIGHT_FINAL = ord("C")
LEFT_FINAL = ord("D")

ARROW_FINALS = frozenset({UP_FINAL, DOWN_FINAL, RIGHT_FINAL, LEFT_FINAL})


class KeyEvent(Enum):
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    OTHER = "other"


_FINAL_TO_EVENT = {
    UP_FINAL: KeyEvent.UP,
    DOWN_FINAL: KeyEvent.DOWN,
}


def _is_end_of_stream(code):
    return code is None or code == EOF


def _is_parameter(code):
    """Digits and ';' make up the optional parameter block, e.g. ESC [ 1 ; 2 B."""
    return ord("0") <= code <= ord("9") or code == ord(";")


def _read_arrow_key(read_unit):
    """Consume the rest of an escape sequence after ESC.

    Returns KeyEvent.UP or KeyEvent.DOWN, or None when the sequence is not
    an up/down arrow. Reading stops at the first unit that cannot continue
    the sequence.
    """
    lead = read_unit()
    if lead not in (CSI_CODE, SS3_CODE):
        return None

    code = read_unit()
    while not _is_end_of_stream(code) and _is_parameter(code):
        code = read_unit()

    if _is_end_of_stream(code) or code not in ARROW_FINALS:
        return None
    return _FINAL_TO_EVENT.get(code)


def read_key_event(read_unit):
    """Read one key event using read_unit.

    Args:
        read_unit: Blocking callable returning one input code (int), or EOF
            (or None) at end of stream.

    Returns:
        KeyEvent. Unknown, malformed and truncated input is KeyEvent.OTHER.
    """
    code = read_unit()
    if code in ENTER_CODES:
        return KeyEvent.ENTER
    if code == ESCAPE_CODE:
        return _read_arrow_key(read_unit) or KeyEvent.OTHER
    return KeyEvent.OTHER
