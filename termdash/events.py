"""
Events delivered to the dashboard and the commands handlers hand back.

A command is a zero-argument callable. The host runs every command returned
by a handler and queues the event it produces, if any.
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Resize:
    """Terminal window changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class KeyPress:
    """A decoded key, e.g. "q", "ctrl+c", "1", "tab"."""

    key: str


@dataclass(frozen=True)
class Quit:
    """Tells the host to stop its run loop."""


Event = Resize | KeyPress | Quit
Command = Callable[[], Event | None]


def quit_command() -> Quit:
    """Command that asks the host to stop."""
    return Quit()


def batch(*groups: list[Command]) -> list[Command]:
    """Flatten several command lists, dropping empty entries."""
    return [cmd for group in groups for cmd in group if cmd is not None]
