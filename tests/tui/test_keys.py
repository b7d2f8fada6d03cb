"""Tests for decoding raw input codes into key events."""

import pytest

from blueprint.tui.keys import KeyEvent, read_key_event
from blueprint.tui.terminal import EOF

from fake_terminal import DOWN, ENTER, LEFT, RIGHT, UP, key_codes


class SeqReader:
    """Yields one code per call, then EOF forever."""

    def __init__(self, codes):
        self.remaining = list(codes)

    def __call__(self):
        if not self.remaining:
            return EOF
        return self.remaining.pop(0)


def _decode(*sequences):
    reader = SeqReader(key_codes(*sequences))
    return read_key_event(reader), reader.remaining


class TestEnter:

    @pytest.mark.parametrize("seq", ["\r", "\n"])
    def test_cr_and_lf_are_enter(self, seq):
        event, _ = _decode(seq)
        assert event is KeyEvent.ENTER


class TestArrows:

    def test_csi_up(self):
        assert _decode(UP)[0] is KeyEvent.UP

    def test_csi_down(self):
        assert _decode(DOWN)[0] is KeyEvent.DOWN

    def test_ss3_up_and_down(self):
        assert _decode("\x1bOA")[0] is KeyEvent.UP
        assert _decode("\x1bOB")[0] is KeyEvent.DOWN

    @pytest.mark.parametrize("seq", ["\x1b[1;2B", "\x1b[1;5B", "\x1b[12;;3B", "\x1bO1;2B"])
    def test_parameterised_down_is_down(self, seq):
        assert _decode(seq)[0] is KeyEvent.DOWN

    def test_parameterised_up_is_up(self):
        assert _decode("\x1b[1;5A")[0] is KeyEvent.UP

    @pytest.mark.parametrize("seq", [LEFT, RIGHT, "\x1b[1;2C", "\x1bOD"])
    def test_left_and_right_are_other(self, seq):
        assert _decode(seq)[0] is KeyEvent.OTHER

    def test_consumes_exactly_one_sequence(self):
        event, remaining = _decode(DOWN, ENTER)
        assert event is KeyEvent.DOWN
        assert remaining == key_codes(ENTER)


class TestOther:

    @pytest.mark.parametrize("seq", ["a", "q", " ", "\x03", "\t"])
    def test_single_units_are_other(self, seq):
        assert _decode(seq)[0] is KeyEvent.OTHER

    def test_unknown_second_unit_abandons_sequence(self):
        event, remaining = _decode("\x1bX", ENTER)
        assert event is KeyEvent.OTHER
        assert remaining == key_codes(ENTER)

    def test_unknown_final_abandons_sequence_at_that_unit(self):
        event, remaining = _decode("\x1b[1;x", ENTER)
        assert event is KeyEvent.OTHER
        assert remaining == key_codes(ENTER)

    def test_csi_with_tilde_final_is_other(self):
        # Delete key: ESC [ 3 ~
        event, remaining = _decode("\x1b[3~")
        assert event is KeyEvent.OTHER
        assert remaining == []


class TestEndOfStream:

    def test_eof_alone_is_other(self):
        assert _decode()[0] is KeyEvent.OTHER

    @pytest.mark.parametrize("seq", ["\x1b", "\x1b[", "\x1b[1;", "\x1bO"])
    def test_eof_mid_sequence_is_other(self, seq):
        assert _decode(seq)[0] is KeyEvent.OTHER

    def test_none_is_treated_as_end_of_stream(self):
        codes = iter([27, ord("["), None])
        assert read_key_event(lambda: next(codes)) is KeyEvent.OTHER
