"""Process-wide default logger and a replaceable logger instance."""

from __future__ import annotations

from typing import Any

from zinx.interfaces import ILogger
from zinx.logger import LogFlag, LoggerCore

std_log = LoggerCore("", LogFlag.DEFAULT)
# The module-level functions add one frame between the caller and output.
std_log._call_depth = 3


class DefaultLogger(ILogger):
    """Logger that forwards to the process-wide ``std_log``."""

    def info_f(self, fmt: str, *args: Any) -> None:
        std_log.infof(fmt, *args)

    def error_f(self, fmt: str, *args: Any) -> None:
        std_log.errorf(fmt, *args)

    def debug_f(self, fmt: str, *args: Any) -> None:
        std_log.debugf(fmt, *args)

    def info_fx(self, ctx: Any, fmt: str, *args: Any) -> None:
        print(ctx)
        std_log.infof(fmt, *args)

    def error_fx(self, ctx: Any, fmt: str, *args: Any) -> None:
        print(ctx)
        std_log.errorf(fmt, *args)

    def debug_fx(self, ctx: Any, fmt: str, *args: Any) -> None:
        print(ctx)
        std_log.debugf(fmt, *args)


class _LoggerSlot:
    """Holds the logger currently returned by ``ins``."""

    def __init__(self, logger: ILogger) -> None:
        self.current = logger


_slot = _LoggerSlot(DefaultLogger())


def set_logger(logger: ILogger) -> None:
    """Replace the logger returned by ``ins``."""
    _slot.current = logger


def ins() -> ILogger:
    """The current replaceable logger."""
    return _slot.current


def flags() -> LogFlag:
    return std_log.flags()


def reset_flags(flag: int) -> None:
    std_log.reset_flags(flag)


def add_flag(flag: int) -> None:
    std_log.add_flag(flag)


def set_prefix(prefix: str) -> None:
    std_log.set_prefix(prefix)


def set_log_level(level: int) -> None:
    std_log.set_log_level(level)


def debugf(fmt: str, *args: Any) -> None:
    std_log.debugf(fmt, *args)


def debug(*args: Any) -> None:
    std_log.debug(*args)


def infof(fmt: str, *args: Any) -> None:
    std_log.infof(fmt, *args)


def info(*args: Any) -> None:
    std_log.info(*args)


def warnf(fmt: str, *args: Any) -> None:
    std_log.warnf(fmt, *args)


def warn(*args: Any) -> None:
    std_log.warn(*args)


def errorf(fmt: str, *args: Any) -> None:
    std_log.errorf(fmt, *args)


def error(*args: Any) -> None:
    std_log.error(*args)


def fatalf(fmt: str, *args: Any) -> None:
    std_log.fatalf(fmt, *args)


def fatal(*args: Any) -> None:
    std_log.fatal(*args)


def panicf(fmt: str, *args: Any) -> None:
    std_log.panicf(fmt, *args)


def panic(*args: Any) -> None:
    std_log.panic(*args)


def stack(*args: Any) -> None:
    std_log.stack(*args)