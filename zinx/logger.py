"""Line-oriented logger with a configurable header and level filtering."""

from __future__ import annotations

import enum
import sys
import threading
import traceback
from datetime import datetime
from typing import Any, Callable, Optional, TextIO

LogHook = Callable[[str], None]


class LogLevel(enum.IntEnum):
    """Severity of a log entry; entries below the isolation level are dropped."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    PANIC = 4
    FATAL = 5


class LogFlag(enum.IntFlag):
    """Bits selecting which parts of the header are written."""

    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONG_FILE = 8
    SHORT_FILE = 16
    LEVEL = 32
    STD_FLAG = DATE | TIME
    DEFAULT = LEVEL | SHORT_FILE | DATE | TIME


class LogPanic(Exception):
    """Raised by the panic methods after the entry has been written."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _sprint(args: tuple[Any, ...]) -> str:
    """Join operands, with a space only between two non-string operands."""
    parts: list[str] = []
    previous: Any = None
    for position, arg in enumerate(args):
        if position and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(arg))
        previous = arg
    return "".join(parts)


def _sprintln(args: tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args) + "\n"


def _sprintf(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _all_thread_stacks() -> str:
    chunks = []
    for thread_id, frame in sys._current_frames().items():
        chunks.append(f"Thread {thread_id}:\n")
        chunks.append("".join(traceback.format_stack(frame)))
    return "".join(chunks)


class LoggerCore:
    """Writes formatted log lines to a stream, guarded by a lock.

    ``stream`` defaults to standard error, looked up at the time of writing.
    """

    def __init__(
        self,
        prefix: str = "",
        flag: int = LogFlag.DEFAULT,
        stream: Optional[TextIO] = None,
    ):
        self._prefix = prefix
        self._flag = int(flag)
        self._stream = stream
        self._isolation_level = int(LogLevel.DEBUG)
        # Frames between ``output`` and the code whose location is logged.
        self._call_depth = 2
        self._hook: Optional[LogHook] = None
        self._lock = threading.Lock()

    def set_log_hook(self, hook: Optional[LogHook]) -> None:
        """Call ``hook`` with every line written."""
        self._hook = hook

    def _format_header(self, now: datetime, file: str, line: int, level: int) -> str:
        flag = self._flag
        parts: list[str] = []
        if self._prefix:
            parts.append(f"<{self._prefix}>")

        if flag & (LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS):
            if flag & LogFlag.DATE:
                parts.append(f"{now.year:04d}/{now.month:02d}/{now.day:02d} ")
            if flag & (LogFlag.TIME | LogFlag.MICROSECONDS):
                parts.append(f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}")
                if flag & LogFlag.MICROSECONDS:
                    parts.append(f".{now.microsecond:06d}")
                parts.append(" ")
            if flag & LogFlag.LEVEL:
                parts.append(f"[{LogLevel(level).name}]")
            if flag & (LogFlag.SHORT_FILE | LogFlag.LONG_FILE):
                if flag & LogFlag.SHORT_FILE:
                    slash = file.rfind("/")
                    if slash > 0:
                        file = file[slash + 1 :]
                parts.append(f"{file}:{line}: ")
        return "".join(parts)

    def output(self, level: int, message: str) -> None:
        """Write ``message`` at ``level`` with the configured header."""
        now = datetime.now()
        file, line = "", 0
        if self._flag & (LogFlag.SHORT_FILE | LogFlag.LONG_FILE):
            try:
                frame = sys._getframe(self._call_depth)
            except ValueError:
                file, line = "unknown-file", 0
            else:
                file, line = frame.f_code.co_filename, frame.f_lineno

        with self._lock:
            text = self._format_header(now, file, line, level) + message
            if message and not message.endswith("\n"):
                text += "\n"
            stream = self._stream if self._stream is not None else sys.stderr
            stream.write(text)
            stream.flush()
            if self._hook is not None:
                self._hook(text)

    def _suppressed(self, level: int) -> bool:
        return self._isolation_level > level

    def debugf(self, fmt: str, *args: Any) -> None:
        if not self._suppressed(LogLevel.DEBUG):
            self.output(LogLevel.DEBUG, _sprintf(fmt, args))

    def debug(self, *args: Any) -> None:
        if not self._suppressed(LogLevel.DEBUG):
            self.output(LogLevel.DEBUG, _sprintln(args))

    def infof(self, fmt: str, *args: Any) -> None:
        if not self._suppressed(LogLevel.INFO):
            self.output(LogLevel.INFO, _sprintf(fmt, args))

    def info(self, *args: Any) -> None:
        if not self._suppressed(LogLevel.INFO):
            self.output(LogLevel.INFO, _sprintln(args))

    def warnf(self, fmt: str, *args: Any) -> None:
        if not self._suppressed(LogLevel.WARN):
            self.output(LogLevel.WARN, _sprintf(fmt, args))

    def warn(self, *args: Any) -> None:
        if not self._suppressed(LogLevel.WARN):
            self.output(LogLevel.WARN, _sprintln(args))

    def errorf(self, fmt: str, *args: Any) -> None:
        if not self._suppressed(LogLevel.ERROR):
            self.output(LogLevel.ERROR, _sprintf(fmt, args))

    def error(self, *args: Any) -> None:
        if not self._suppressed(LogLevel.ERROR):
            self.output(LogLevel.ERROR, _sprintln(args))

    def fatalf(self, fmt: str, *args: Any) -> None:
        """Log at FATAL and exit with status 1."""
        if self._suppressed(LogLevel.FATAL):
            return
        self.output(LogLevel.FATAL, _sprintf(fmt, args))
        raise SystemExit(1)

    def fatal(self, *args: Any) -> None:
        """Log at FATAL and exit with status 1."""
        if self._suppressed(LogLevel.FATAL):
            return
        self.output(LogLevel.FATAL, _sprintln(args))
        raise SystemExit(1)

    def panicf(self, fmt: str, *args: Any) -> None:
        """Log at PANIC and raise ``LogPanic``."""
        if self._suppressed(LogLevel.PANIC):
            return
        message = _sprintf(fmt, args)
        self.output(LogLevel.PANIC, message)
        raise LogPanic(message)

    def panic(self, *args: Any) -> None:
        """Log at PANIC and raise ``LogPanic``."""
        if self._suppressed(LogLevel.PANIC):
            return
        message = _sprintln(args)
        self.output(LogLevel.PANIC, message)
        raise LogPanic(message)

    def stack(self, *args: Any) -> None:
        """Log the operands followed by the stacks of all threads at ERROR."""
        message = _sprint(args) + "\n" + _all_thread_stacks() + "\n"
        self.output(LogLevel.ERROR, message)

    def flags(self) -> LogFlag:
        with self._lock:
            return LogFlag(self._flag)

    def reset_flags(self, flag: int) -> None:
        with self._lock:
            self._flag = int(flag)

    def add_flag(self, flag: int) -> None:
        with self._lock:
            self._flag |= int(flag)

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix

    def set_log_level(self, level: int) -> None:
        self._isolation_level = int(level)