"""Application-wide logging initialization

IMPORTANT: the library never configures logging by itself. Entry points
(e.g. the `shortlinks` CLI) call `initialize_logging()` before any other
logging is done.

Logging formats:
    json (default):
        {
            "timestamp": "2025-12-26T12:00:00.000Z",
            "level": "INFO",
            "logger": "shortlinks.dao.file.short_link_file_dao",
            "message": "Replayed short link log.",
            "path": "shortlinks.tsv",
            "restored": 42
        }

    text:
        2025-12-26 12:00:00,000 INFO shortlinks.dao.file.short_link_file_dao: Replayed short link log.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinks.constants import ENV, Defaults
from shortlinks.exceptions import BadConfigurationError


TEXT_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None, fmt: str | None = None, stream: str = 'ext://sys.stdout') -> None:
    """Configure the root logger with a single stream handler.

    Args:
        level (str | None):
            Log level name. Falls back to $LOG_LEVEL, then 'INFO'.
        fmt (str | None):
            'json' or 'text'. Falls back to $LOG_FORMAT, then 'json'.
        stream (str):
            dictConfig reference to the handler's stream. Programs that print
            results to stdout pass 'ext://sys.stderr'.

    Raises:
        BadConfigurationError: If the level is unknown or the format is neither 'json' nor 'text'.
    """
    log_level = (level or os.getenv(ENV.Logging.LEVEL, Defaults.LOG_LEVEL)).upper()
    log_format = (fmt or os.getenv(ENV.Logging.FORMAT, Defaults.LOG_FORMAT)).lower()
    if log_level not in logging.getLevelNamesMapping():
        raise BadConfigurationError(f'Unknown log level {log_level!r}.')
    if log_format not in {'json', 'text'}:
        raise BadConfigurationError(f"Log format must be 'json' or 'text' (given value: {log_format!r}).")

    formatters = {
        'json': {'()': JsonFormatter},
        'text': {'format': TEXT_FORMAT},
    }
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {log_format: formatters[log_format]},
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'formatter': log_format,
                    'stream': stream,
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['console'],
            },
        }
    )
