"""Colored logging for artifactpath."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import TextIO

# ANSI color codes
RESET = "\033[0m"
DIM = "\033[2m"

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

LEVEL_COLORS = {
    "DEBUG": DIM,
    "INFO": GREEN,
    "WARN": YELLOW,
    "ERROR": RED,
}

TAG_COLORS = {
    "NAME": CYAN,
    "RESOLVE": BLUE,
    "FS": MAGENTA,
    "CONFIG": YELLOW,
}


class Logger:
    """Colored console logger."""

    def __init__(
        self,
        verbose: bool = False,
        *,
        color: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.verbose = verbose
        self.color = color
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Looked up per write so a replaced sys.stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    def debug(self, tag: str, message: str) -> None:
        if self.verbose:
            self._log("DEBUG", tag, message)

    def info(self, tag: str, message: str) -> None:
        self._log("INFO", tag, message)

    def warn(self, tag: str, message: str) -> None:
        self._log("WARN", tag, message)

    def error(self, tag: str, message: str) -> None:
        self._log("ERROR", tag, message)

    def _paint(self, color: str, text: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{RESET}"

    def _log(self, level: str, tag: str, message: str) -> None:
        time_str = datetime.now().strftime("%H:%M:%S")

        level_color = LEVEL_COLORS.get(level, "")
        tag_color = TAG_COLORS.get(tag, WHITE)

        line = (
            f"{self._paint(DIM, f'[{time_str}]')} "
            f"{self._paint(level_color, f'[{level}]')} "
            f"{self._paint(tag_color, f'[{tag}]')} "
            f"{message}"
        )
        self.stream.write(line + "\n")
        self.stream.flush()
