"""
Terminal host for the dashboard.

Reads the keyboard, notices window resizes and drives a rich Live display.
Events go through a single FIFO queue and are handled one at a time.
"""

import codecs
import logging
import os
import sys
import time
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from rich.console import Console
from rich.live import Live

from .app import DashboardApp
from .config import RunConfig
from .events import Command, Event, KeyPress, Quit, Resize
from .exceptions import TerminalError

# Cross-platform keyboard input
if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)

KEY_NAMES = {
    "\x03": "ctrl+c",
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\b": "backspace",
    " ": "space",
}

ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}


def decode_key(char: str) -> str:
    """Name a single input character."""
    if char in KEY_NAMES:
        return KEY_NAMES[char]
    if len(char) == 1 and ord(char) < 32:
        return f"ctrl+{chr(ord(char) + 96)}"
    return char


def decode_keys(data: str) -> list[str]:
    """
    Split a chunk of raw terminal input into key names.

    Args:
        data: Characters read from the terminal in one go

    Returns:
        Key names in input order, e.g. ["2", "up", "q"]
    """
    keys = []
    i = 0
    while i < len(data):
        if data[i] == "\x1b":
            sequence = data[i : i + 3]
            if sequence in ESCAPE_SEQUENCES:
                keys.append(ESCAPE_SEQUENCES[sequence])
                i += 3
                continue
        keys.append(decode_key(data[i]))
        i += 1
    return keys


@contextmanager
def cbreak_mode(stream: TextIO) -> Iterator[None]:
    """Deliver keys without waiting for Enter; restores the terminal on exit."""
    if sys.platform == "win32":
        yield
        return

    old_settings = None
    try:
        fd = stream.fileno()
        old_settings = termios.tcgetattr(fd)
        tty.setcbreak(fd)
    except (termios.error, OSError, ValueError) as e:
        logger.warning(f"Could not switch terminal to cbreak mode: {e}")

    try:
        yield
    finally:
        if old_settings is not None:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
            except termios.error as e:
                logger.warning(f"Could not restore terminal settings: {e}")


class TerminalRunner:
    """Runs a DashboardApp in the terminal until it asks to quit."""

    def __init__(
        self,
        app: DashboardApp,
        config: RunConfig | None = None,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ):
        self.app = app
        self.config = config or RunConfig()
        self.console = console or Console()
        self.stdin = stdin or sys.stdin
        self.queue: deque[Event] = deque()
        self.running = False
        self._size: tuple[int, int] | None = None
        # Holds back a multibyte character split across two reads
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")

    @property
    def frame_interval(self) -> float:
        return 1.0 / self.config.refresh_per_second

    def run_commands(self, cmds: list[Command]) -> None:
        """Run commands and queue whatever events they produce."""
        for cmd in cmds:
            event = cmd()
            if event is not None:
                self.queue.append(event)

    def process_events(self) -> bool:
        """
        Handle every queued event in arrival order.

        Returns:
            False once a Quit event was reached, True otherwise
        """
        while self.queue:
            event = self.queue.popleft()
            if isinstance(event, Quit):
                self.queue.clear()
                return False
            _, cmds = self.app.handle_event(event)
            self.run_commands(cmds)
        return True

    def poll_resize(self) -> bool:
        """Queue a Resize event if the console size changed since the last poll."""
        size = self.console.size
        current = (size.width, size.height)
        if current == self._size:
            return False
        self._size = current
        self.queue.append(Resize(*current))
        return True

    def read_keys(self, timeout: float) -> list[str]:
        """Wait up to `timeout` seconds for input and return the keys read."""
        if sys.platform == "win32":
            chars = ""
            while msvcrt.kbhit():
                chars += msvcrt.getwch()
            if not chars:
                time.sleep(timeout)
            return decode_keys(chars)

        ready, _, _ = select.select([self.stdin], [], [], timeout)
        if not ready:
            return []
        data = os.read(self.stdin.fileno(), 64)
        if not data:
            # stdin closed; avoid spinning on a permanently readable descriptor
            time.sleep(timeout)
            return []
        return decode_keys(self._decoder.decode(data))

    def snapshot(self, width: int, height: int) -> str:
        """Render a single frame at the given size without touching the terminal."""
        self.run_commands(self.app.init())
        self.queue.append(Resize(width, height))
        self.process_events()
        return self.app.render()

    def run(self) -> None:
        """
        Run the interactive dashboard.

        Raises:
            TerminalError: If the console is not an interactive terminal
        """
        if not self.console.is_terminal:
            raise TerminalError(
                "TermDash needs an interactive terminal. Use --once to print a single frame."
            )

        self.running = True
        self.run_commands(self.app.init())
        logger.debug("Dashboard started")

        try:
            with cbreak_mode(self.stdin), Live(
                self.app.compose(),
                console=self.console,
                auto_refresh=False,
                screen=self.config.alt_screen,
            ) as live:
                while self.running:
                    dirty = False
                    try:
                        dirty = self.poll_resize()
                        for key in self.read_keys(self.frame_interval):
                            self.queue.append(KeyPress(key))
                            dirty = True
                    except KeyboardInterrupt:
                        self.queue.append(KeyPress("ctrl+c"))
                        dirty = True

                    if not self.process_events():
                        break
                    if dirty:
                        live.update(self.app.compose(), refresh=True)
        finally:
            self.running = False
            logger.debug("Dashboard stopped")

        if self.app.state.quitting:
            self.console.print(self.app.compose())
