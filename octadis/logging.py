"""Console logging utilities for the disassembler.

Log records go to stderr so a listing written to stdout stays clean.
"""

import sys
import time
from typing import Iterable, Optional, TextIO

from tqdm import tqdm

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET = "\033[0m"


class ConsoleLogger:
    """Leveled logger writing one line per record to a text stream.

    Colors are only used when the stream is a terminal.
    """

    def __init__(
        self,
        name: str = "octadis",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream: Optional[TextIO] = None,
    ):
        log_level = log_level.upper()
        if log_level not in LEVELS:
            raise ValueError(f"Unknown log level '{log_level}'. Available: {list(LEVELS)}")

        self.name = name
        self.threshold = LEVELS.index(log_level)
        self.stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and getattr(self.stream, "isatty", lambda: False)()
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def format(self, level: str, message: str) -> str:
        """Prefix message with elapsed time, level tag and logger name."""
        tag = f"[{level:>8s}]"
        if self.use_colors:
            tag = f"{LEVEL_COLORS[level]}{tag}{RESET}"
        elapsed = f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        return f"{elapsed}{tag}[{self.name}] {message}"

    def log(self, level: str, message: str):
        level = level.upper()
        if LEVELS.index(level) >= self.threshold:
            print(self.format(level, message), file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


def progress(
    iterable: Iterable,
    total: Optional[int] = None,
    desc: Optional[str] = None,
    enabled: bool = True,
    **kwargs,
) -> Iterable:
    """Wrap an iterable in a tqdm progress bar on stderr."""
    if desc is None:
        desc = "Disassembling"
    stream = kwargs.pop("file", sys.stderr)

    return tqdm(
        iterable,
        total=total,
        desc=desc,
        unit="instr",
        disable=not enabled,
        file=stream,
        **kwargs,
    )
