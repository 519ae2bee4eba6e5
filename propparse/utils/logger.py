"""
Structured logging for the proposition parser.

Provides configurable log levels (silent, normal, verbose, debug)
with consistent formatting for token traces, parse results
and tree statistics.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Dict, Optional, TextIO


class LogLevel(Enum):
    """
    Logging levels for the parser.

    SILENT:  No output at all.
    NORMAL:  Parse output only, no diagnostics.
    VERBOSE: Parse results and statistics.
    DEBUG:   Per-token trace of the lexer.
    """

    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class ParserLogger:
    """
    Structured logger for the proposition parser.

    Output is filtered by the configured log level.

    Attributes:
        level: The minimum log level to display.
        stream: The output stream (defaults to stdout).
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        stream: TextIO = sys.stdout,
    ) -> None:
        self.level: LogLevel = level
        self.stream: TextIO = stream

    def enabled(self, level: LogLevel) -> bool:
        """Return True if messages at ``level`` would be written."""
        return self.level.value >= level.value

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message (only shown at DEBUG level).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.enabled(LogLevel.DEBUG):
            self._write(f"[DEBUG] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log an info message (shown at VERBOSE and DEBUG levels).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.enabled(LogLevel.VERBOSE):
            self._write(f"[INFO] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def token(self, tok: Optional[Any], cursor: int) -> None:
        """
        Log a token pulled from the lexer (shown at DEBUG level).

        Args:
            tok: The token, or None at end of input.
            cursor: Index of the token in the source text.
        """
        if self.enabled(LogLevel.DEBUG):
            if tok is None:
                self._write(f"[TOKEN] <end> @{cursor}")
            else:
                self._write(f"[TOKEN] {tok.type} {tok.value!r} @{cursor}")

    def parsed(self, text: str, node_count: int) -> None:
        """Log a successful parse (shown at VERBOSE level and above)."""
        if self.enabled(LogLevel.VERBOSE):
            self._write(f"PARSED: {text!r} ({node_count} nodes)")

    def statistics(self, stats: Dict[str, Any]) -> None:
        """
        Log tree statistics (shown at VERBOSE level and above).

        Args:
            stats: Dictionary of statistic names to values.
        """
        if self.enabled(LogLevel.VERBOSE):
            self._write("=== Statistics ===")
            for key, value in stats.items():
                label = key.replace("_", " ").title()
                self._write(f"  {label}: {value}")

    def _write(self, message: str) -> None:
        """Write a line to the output stream."""
        self.stream.write(message + "\n")
