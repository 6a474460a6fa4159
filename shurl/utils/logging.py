"""Logging setup for the shurl command

IMPORTANT: Call `initialize_logging()` in the command entrypoint before any
other logging is done.

Records are written to stderr as one JSON object per line, so the command's
own output on stdout stays readable. The level comes from `SHURL_LOG_LEVEL`
(default: WARNING, i.e. only failed pushes and overwritten links show up).

Every `extra` passed to a logger call becomes a top-level key:

    >>> logger.info('Created commit.', extra={'commitId': commit_id})
    {"timestamp": "2026-10-18T12:00:00.000Z", "level": "INFO", "logger": "shurl.vcs.commit_builder",
     "message": "Created commit.", "commitId": "3b18e512dba79e4c8300dd08aeb37f8e728b8dad"}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shurl.constants import ENV


DEFAULT_LOG_LEVEL = 'WARNING'

# Attributes every LogRecord has; anything else on a record came from `extra`
RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON including `extra` fields"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds')

        log = {
            'timestamp': timestamp.replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in record.__dict__.items() if key not in RECORD_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Paths and bytes in extras are rendered with str()
        return json.dumps(log, default=str)


def log_level() -> str:
    return (os.getenv(ENV.App.LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def initialize_logging() -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {'()': JsonFormatter},
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                },
            },
            'root': {
                'level': log_level(),
                'handlers': ['stderr'],
            },
        }
    )
