"""Structured logging for the hello bot.

The bot and the ``botapi`` library share one pair of handlers: a console
stream and ``logs/hellobot.log``, which rolls over at 5 MB.  Records are
emitted one JSON document per line so they can be tailed and grepped by key.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional, Union


class _JsonFormatter(logging.Formatter):
    """Render a record as one line of JSON.

    Keys passed through ``extra`` (``chat_id``, ``update_id``,
    ``api_endpoint``...) become top-level keys next to the fixed ones; a
    traceback, if any, goes under ``exception``::

        {"timestamp": "...", "level": "ERROR", "logger": "botapi.client",
         "message": "Bot API request failed", "api_endpoint": "sendMessage",
         "status_code": 403}
    """

    _BUILTIN_ATTRS: frozenset = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class HelloBotLogger:
    """Process-wide owner of the bot's log handlers.

    The first construction configures the ``hellobot`` and ``botapi``
    loggers; every later one returns the same object.  Modules grab the
    logger once at import time::

        logger = HelloBotLogger.get_logger()
        logger.info("Polling started", extra={"offset": 0})
    """

    _instance: Optional["HelloBotLogger"] = None
    _logger: Optional[logging.Logger] = None

    _LOGGER_NAME: str = "hellobot"
    _LIBRARY_LOGGER_NAME: str = "botapi"
    _LOG_DIR: str = "logs"
    _LOG_FILE: str = "hellobot.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: Union[int, str] = logging.INFO) -> "HelloBotLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level)
        return cls._instance

    def _loggers(self) -> tuple:
        return logging.getLogger(self._LOGGER_NAME), logging.getLogger(self._LIBRARY_LOGGER_NAME)

    def _init_logger(self, level: Union[int, str]) -> None:
        app_logger, library_logger = self._loggers()
        self._logger = app_logger
        for target in (app_logger, library_logger):
            target.setLevel(level)

        # Handlers survive a module reload.
        if app_logger.handlers:
            return

        os.makedirs(self._LOG_DIR, exist_ok=True)
        handlers = [
            logging.StreamHandler(),
            RotatingFileHandler(
                os.path.join(self._LOG_DIR, self._LOG_FILE),
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            ),
        ]
        formatter = _JsonFormatter()
        for handler in handlers:
            handler.setFormatter(formatter)
            handler.setLevel(level)
            app_logger.addHandler(handler)
            library_logger.addHandler(handler)

    @staticmethod
    def get_logger(level: Union[int, str] = logging.INFO) -> logging.Logger:
        """The ``hellobot`` logger; *level* only matters on the very first call."""
        instance = HelloBotLogger(level)
        assert instance._logger is not None
        return instance._logger

    def cleanup(self) -> None:
        """Detach the shared handlers from both loggers and close them.

        Called from ``main`` on shutdown so the log file is flushed.
        """
        if self._logger is None:
            return
        app_logger, library_logger = self._loggers()
        for handler in list(app_logger.handlers):
            handler.flush()
            handler.close()
            app_logger.removeHandler(handler)
            library_logger.removeHandler(handler)
