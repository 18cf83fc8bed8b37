# services/clipboard.py
"""
Copy-to-clipboard control.

``CopyButton`` is the view model the templates render (the browser does the
actual clipboard write). ``CopyAction`` is the same behaviour outside a
browser: write once, raise a transient "copied" flag, drop it again after a
fixed delay.
"""
import logging
import shutil
import subprocess
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from core.config import settings

logger = logging.getLogger("clipboard")

DEFAULT_RESET_SECONDS = 2.0


class Clipboard(Protocol):
    def write(self, text: str) -> None: ...


class ClipboardUnavailable(RuntimeError):
    pass


# first one found on PATH wins
_SYSTEM_COMMANDS = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


class SystemClipboard:
    def __init__(self, command: Optional[tuple] = None):
        self.command = command or self._detect()

    @staticmethod
    def _detect() -> tuple:
        for cmd in _SYSTEM_COMMANDS:
            if shutil.which(cmd[0]):
                return cmd
        raise ClipboardUnavailable("no clipboard tool found (tried pbcopy, wl-copy, xclip, xsel)")

    def write(self, text: str) -> None:
        subprocess.run(list(self.command), input=text.encode("utf-8"), check=True)


@dataclass
class CopyButton:
    text: str
    label: str
    size: str = "sm"

    @property
    def title(self) -> str:
        return f"{self.label}: {self.text}"

    @property
    def icon_class(self) -> str:
        return "icon-sm" if self.size == "sm" else "icon-md"

    @property
    def reset_ms(self) -> int:
        return settings.copy_reset_ms


class CopyAction:
    """
    ``copy()`` writes to the clipboard exactly once and sets ``copied``; a timer
    clears the flag after ``reset_after`` seconds. Copying again restarts the
    timer. ``close()`` (or leaving the ``with`` block) cancels it and clears the flag.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        reset_after: float = DEFAULT_RESET_SECONDS,
        timer_factory: Callable[[float, Callable[[], None]], threading.Timer] = threading.Timer,
    ):
        self.clipboard = clipboard
        self.reset_after = reset_after
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0
        self._copied = False
        self._lock = threading.Lock()

    @property
    def copied(self) -> bool:
        with self._lock:
            return self._copied

    def copy(self, text: str) -> None:
        self.clipboard.write(text)
        with self._lock:
            self._cancel_timer()
            self._copied = True
            generation = self._generation
            timer = self._timer_factory(self.reset_after, lambda: self._reset(generation))
            timer.daemon = True
            self._timer = timer
        timer.start()
        logger.info("copied to clipboard", extra={"chars": len(text)})

    def _reset(self, generation: int) -> None:
        with self._lock:
            # a cancelled timer may already be running; only the latest one counts
            if generation != self._generation:
                return
            self._copied = False
            self._timer = None

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def close(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._copied = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
