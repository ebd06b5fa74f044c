"""Tests for events and command helpers."""

import pytest

from termdash.events import KeyPress, Quit, Resize, batch, quit_command


class TestEvents:
    def test_value_equality(self):
        assert Resize(80, 24) == Resize(80, 24)
        assert KeyPress("q") != KeyPress("Q")

    def test_immutable(self):
        with pytest.raises(AttributeError):
            KeyPress("q").key = "x"


class TestCommands:
    def test_quit_command(self):
        assert quit_command() == Quit()

    def test_batch_flattens_in_order(self):
        first, second = (lambda: None), (lambda: KeyPress("1"))
        assert batch([first], [], [None, second]) == [first, second]

    def test_batch_empty(self):
        assert batch() == []
