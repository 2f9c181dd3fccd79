"""Logging utilities with timing and frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Tagged logger that stamps every line with elapsed time and frame number."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0
        self._stream: Optional[TextIO] = stream
        self.quiet: bool = False

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    @frame.setter
    def frame(self, value: int) -> None:
        self._frame = value

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @stream.setter
    def stream(self, value: Optional[TextIO]) -> None:
        self._stream = value

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        """Write one line; falls back to stderr if the stream is broken."""
        if self.quiet:
            return
        line = self.format(msg)
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError):
            try:
                sys.stderr.write(line)
                sys.stderr.flush()
            except (OSError, ValueError):
                pass

    def __call__(self, msg: str) -> None:
        self.log(msg)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def set_quiet(quiet: bool) -> None:
    get_logger().quiet = quiet


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().increment_frame()
