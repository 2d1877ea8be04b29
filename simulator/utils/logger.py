# IN THIS FILE: CONSOLE LOGGING, GATED BY consts.LOG_LEVEL
from enum import Enum

from simulator.utils import consts


class LogLevel(Enum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


def current_level() -> LogLevel:
    # Unknown names fall back to INFO
    return LogLevel.__members__.get(consts.LOG_LEVEL, LogLevel.INFO)


def log(level: LogLevel, message: str) -> None:
    if level.value < current_level().value:
        return
    print(f"[{level.name}] {message}")


def log_debug(message: str) -> None:
    log(LogLevel.DEBUG, message)


def log_info(message: str) -> None:
    log(LogLevel.INFO, message)


def log_warn(message: str) -> None:
    log(LogLevel.WARN, message)


def log_error(message: str) -> None:
    log(LogLevel.ERROR, message)
