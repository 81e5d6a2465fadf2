# stackmeta/utils/logger.py
import datetime

from stackmeta.config import LOG_LEVEL

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    NAMES = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARN",
        ERROR: "ERROR",
        CRITICAL: "CRIT"
    }

class Logger:
    _instance = None
    _level = LOG_LEVEL
    _history: list = []  # Last messages, kept for inspection in tests
    _history_size = 50

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def is_enabled(cls, level: int) -> bool:
        return level >= cls._level

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        level_name = LogLevel.NAMES.get(level, "LOG")
        cls._history.append((level_name, source, message))
        if len(cls._history) > cls._history_size:
            del cls._history[0]

        if cls.is_enabled(level):
            timestamp = datetime.datetime.now().strftime("%H:%M:%S")
            # Format: [TIME] [LEVEL] [Source] Message
            print(f"[{timestamp}] [{level_name:<5}] [{source}] {message}")

    @classmethod
    def history(cls, level_name: str = "") -> list:
        """Returns recorded (level, source, message) tuples, optionally filtered by level name."""
        if not level_name:
            return list(cls._history)
        return [entry for entry in cls._history if entry[0] == level_name]

    @classmethod
    def clear_history(cls):
        cls._history.clear()

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
