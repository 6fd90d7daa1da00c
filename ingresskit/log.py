"""Levelled logging with optional caller file and line information."""

from __future__ import annotations

import functools
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

# Files directly inside these directories are shown without their parent.
_ROOT_DIRS = frozenset({"ingresskit"})


class LogLevel(IntEnum):
    """Severity levels; a higher value shows more output."""

    PANIC = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


class LoggerPanic(RuntimeError):
    """Raised by ``panic`` when the value handed to it is not an exception."""

    def __init__(self, value: Any) -> None:
        super().__init__(str(value))
        self.value = value


@dataclass
class Logger:
    """Writes timestamped lines; errors and panics are always shown.

    ``None`` arguments are skipped, so ``logger.error(err)`` only writes
    something when there is an error.
    """

    level: LogLevel = LogLevel.WARNING
    file_name: bool = True
    stream: TextIO | None = None

    def set_level(self, level: LogLevel) -> None:
        self.level = LogLevel(level)

    def show_filename(self, show: bool) -> None:
        self.file_name = show

    def _write(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
        stream.write(f"{stamp} {line}\n")

    @staticmethod
    def _caller() -> str | None:
        # Frames: 0 this, 1 _log/_logf, 2 public method, 3 its caller.
        try:
            frame = sys._getframe(3)
        except ValueError:
            return None
        path = Path(frame.f_code.co_filename)
        if path.parent.name in _ROOT_DIRS or not path.parent.name:
            shown = path.name
        else:
            shown = f"{path.parent.name}/{path.name}"
        return f"{shown}:{frame.f_lineno}"

    def _log(self, prefix: str, args: tuple[Any, ...]) -> None:
        if not self.file_name:
            for item in args:
                if item is not None:
                    self._write(f"{prefix}{item}")
            return
        location = self._caller()
        if location is None:
            return
        for item in args:
            if item is not None:
                self._write(f"{prefix}{location} {item}")

    def _logf(self, prefix: str, fmt: str, args: tuple[Any, ...]) -> None:
        line = fmt % args if args else fmt
        if not self.file_name:
            self._write(f"{prefix}{line}")
            return
        location = self._caller()
        if location is None:
            return
        self._write(f"{prefix}{location} {line}")

    def print(self, *args: Any) -> None:
        """Always written, whatever the level."""
        self._log("", args)

    def printf(self, fmt: str, *args: Any) -> None:
        self._logf("", fmt, args)

    def trace(self, *args: Any) -> None:
        if self.level >= LogLevel.TRACE:
            self._log("TRACE   ", args)

    def tracef(self, fmt: str, *args: Any) -> None:
        if self.level >= LogLevel.TRACE:
            self._logf("TRACE   ", fmt, args)

    def debug(self, *args: Any) -> None:
        if self.level >= LogLevel.DEBUG:
            self._log("DEBUG   ", args)

    def debugf(self, fmt: str, *args: Any) -> None:
        if self.level >= LogLevel.DEBUG:
            self._logf("DEBUG   ", fmt, args)

    def info(self, *args: Any) -> None:
        if self.level >= LogLevel.INFO:
            self._log("INFO    ", args)

    def infof(self, fmt: str, *args: Any) -> None:
        if self.level >= LogLevel.INFO:
            self._logf("INFO    ", fmt, args)

    def warning(self, *args: Any) -> None:
        if self.level >= LogLevel.WARNING:
            self._log("WARNING ", args)

    def warningf(self, fmt: str, *args: Any) -> None:
        if self.level >= LogLevel.WARNING:
            self._logf("WARNING ", fmt, args)

    def error(self, *args: Any) -> None:
        self._log("ERROR   ", args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._logf("ERROR   ", fmt, args)

    def err(self, *args: Any) -> list[BaseException]:
        """Log the arguments and return those that are exceptions."""
        self._log("ERROR   ", args)
        return [item for item in args if isinstance(item, BaseException)]

    def panic(self, *args: Any) -> None:
        """Log the arguments, then raise the first one that is not ``None``."""
        self._log("PANIC   ", args)
        self._raise_first(args)

    def panicf(self, fmt: str, *args: Any) -> None:
        self._logf("PANIC   ", fmt, args)
        self._raise_first(args)

    @staticmethod
    def _raise_first(args: tuple[Any, ...]) -> None:
        for value in args:
            if value is None:
                continue
            if isinstance(value, BaseException):
                raise value
            raise LoggerPanic(value)


@functools.lru_cache(maxsize=None)
def get_logger() -> Logger:
    """The shared application logger, starting at WARNING level."""
    return Logger(level=LogLevel.WARNING, file_name=True)


@functools.lru_cache(maxsize=None)
def get_k8s_api_logger() -> Logger:
    """The shared logger for cluster API traffic, starting at TRACE level."""
    return Logger(level=LogLevel.TRACE, file_name=True)